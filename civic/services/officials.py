"""
Regional Official Management

Administrators create, list and remove the officials issues are routed to.
A zone is covered by at most one official: a second account for a covered
zone is rejected.
"""

import logging
from flask import current_app
from werkzeug.security import generate_password_hash
from civic.errors import DuplicateEmailError, InvalidTargetError, NotFoundError, ZoneTakenError
from civic.extensions import db
from civic.models import Comment, Issue, Role, User
from civic.repositories import issue_repository, notification_sink, user_directory
from civic.schemas import validate_official_payload
from civic.services import routing

logger = logging.getLogger(__name__)


def create_official(payload):
    data = validate_official_payload(payload)

    if user_directory.exists_by_email(data['email']):
        raise DuplicateEmailError(data['email'])

    existing = user_directory.find_by_role_and_zone(Role.REGIONAL_ADMIN, data['zone'])
    if existing is not None:
        raise ZoneTakenError(data['zone'], existing.email)

    official = User(
        name=data['name'],
        email=data['email'],
        password_hash=generate_password_hash(
            data['password'], method=current_app.config['PASSWORD_HASH_METHOD']),
        role=Role.REGIONAL_ADMIN,
        zone=data['zone'],
    )
    try:
        db.session.add(official)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info('Regional admin %s created for zone %s', official.email, official.zone.name)
    return official


def zone_counts(official):
    """Issue counts by status for the zone an official covers."""
    return issue_repository.count_by_status(official.zone)


def list_officials():
    """Officials paired with issue counts for the zone they cover."""
    return [
        (official, zone_counts(official))
        for official in user_directory.find_by_role(Role.REGIONAL_ADMIN)
    ]


def remove_official(official_id):
    """Delete an official account.

    Their issues become unassigned (zones untouched), their comments lose
    the author reference, and their notifications and own reports go with
    the account.
    """
    official = user_directory.find_by_id(official_id)
    if official is None:
        raise NotFoundError('Regional admin', official_id)
    if official.role != Role.REGIONAL_ADMIN:
        raise InvalidTargetError('User is not a regional admin')

    try:
        routing.unassign_all_for(official.id)
        Comment.query.filter_by(author_id=official.id).update({'author_id': None})
        notification_sink.delete_for_recipient(official.id)
        for issue in Issue.query.filter_by(created_by_id=official.id).all():
            issue_repository.delete(issue)
        db.session.delete(official)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info('Regional admin #%s removed', official_id)
