"""
Issue Lifecycle

Creation (classify, then route), status changes (guard, mutate, notify),
administrative reassignment and deletion, comments and read views.

Each public function is one unit of work: it commits on success and rolls
the session back on failure.
"""

import logging
from civic.errors import NotFoundError, ValidationError
from civic.extensions import db
from civic.models import Comment, Issue, IssueStatus, Role
from civic.repositories import issue_repository, notification_sink, user_directory
from civic.schemas import parse_status, validate_issue_payload
from civic.services import routing
from civic.services.authorization import ensure_can_update_status, require_role
from civic.services.zoning import classify, describe

logger = logging.getLogger(__name__)

STATUS_MESSAGE = "Your issue '{title}' status has been updated to {status}."

# Allowed status changes. Every pair is currently permitted, including
# setting the status an issue already has.
STATUS_TRANSITIONS = {status: frozenset(IssueStatus) for status in IssueStatus}


def _load_issue(issue_id, for_update=False):
    issue = issue_repository.find_by_id(issue_id, for_update=for_update)
    if issue is None:
        raise NotFoundError('Issue', issue_id)
    return issue


def create_issue(payload, creator_id):
    """Persist a new PENDING issue, zoned and routed from its coordinates."""
    data = validate_issue_payload(payload)

    zone = classify(data['latitude'], data['longitude'])
    assignee_id = routing.route(zone, user_directory)

    issue = Issue(
        title=data['title'],
        description=data['description'],
        category=data['category'],
        image_url=data['image_url'],
        latitude=data['latitude'],
        longitude=data['longitude'],
        status=IssueStatus.PENDING,
        created_by_id=creator_id,
        zone=zone,
        assigned_to_id=assignee_id,
    )
    try:
        issue_repository.save(issue)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    if assignee_id is not None:
        logger.info('Issue #%s -> Zone: %s -> Assigned to official #%s', issue.id, zone.name, assignee_id)
    else:
        logger.info('Issue #%s -> Zone: %s -> No regional admin found - UNASSIGNED', issue.id, zone.name)
    return issue


def update_status(issue_id, new_status, actor):
    """Change an issue's status and notify its creator.

    The issue row is locked for the whole check-then-write sequence, and the
    status change and notification are committed together.
    """
    try:
        issue = _load_issue(issue_id, for_update=True)
        ensure_can_update_status(actor, issue)
        status = parse_status(new_status)

        if status not in STATUS_TRANSITIONS[issue.status]:
            raise ValidationError({
                'status': f'Cannot move issue from {issue.status.name} to {status.name}'})

        issue.status = status
        issue_repository.save(issue)
        notification_sink.record(
            issue.created_by_id, STATUS_MESSAGE.format(title=issue.title, status=status.name))
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    logger.info('Issue #%s status -> %s | by %s #%s', issue.id, status.name, actor.role.name, actor.id)
    return issue


def delete_issue(issue_id):
    """Remove an issue together with its comments."""
    issue = _load_issue(issue_id)
    try:
        issue_repository.delete(issue)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    logger.info('Issue #%s deleted', issue_id)


def add_comment(issue_id, author_id, text):
    """Append a comment; zone, assignment and status are untouched."""
    if not isinstance(text, str) or not text.strip():
        raise ValidationError({'text': 'Comment text is required'})
    issue = _load_issue(issue_id)
    comment = Comment(text=text.strip(), author_id=author_id)
    try:
        issue.comments.append(comment)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return comment


def assign_issue(issue_id, official_id, actor):
    """Administrative override of an issue's assignee (and zone)."""
    issue = _load_issue(issue_id, for_update=True)
    try:
        routing.reassign(issue, official_id, actor.role, user_directory)
        issue_repository.save(issue)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return issue


# -------------------------------------------------------------------------
# Read views
# -------------------------------------------------------------------------

def get_issue(issue_id):
    return _load_issue(issue_id)


def list_issues():
    return issue_repository.find_all()


def list_issues_for(user_id):
    return issue_repository.find_by_creator(user_id)


def list_unassigned():
    return issue_repository.find_unassigned()


def list_zone_issues(actor):
    """ADMIN sees every issue; a REGIONAL_ADMIN sees only their zone."""
    require_role(actor, Role.ADMIN, Role.REGIONAL_ADMIN)
    if actor.role == Role.ADMIN:
        return issue_repository.find_all()
    return issue_repository.find_by_zone(actor.zone)


def zone_stats(actor):
    require_role(actor, Role.ADMIN, Role.REGIONAL_ADMIN)
    if actor.role == Role.ADMIN:
        counts = issue_repository.count_by_status()
        zone, label = 'ALL', 'All Zones'
    else:
        counts = issue_repository.count_by_status(actor.zone)
        zone = actor.zone.name if actor.zone is not None else None
        label = describe(actor.zone) if actor.zone is not None else 'No zone assigned'

    return {
        'zone': zone,
        'zone_description': label,
        'total': sum(counts.values()),
        'pending': counts[IssueStatus.PENDING],
        'in_progress': counts[IssueStatus.IN_PROGRESS],
        'resolved': counts[IssueStatus.RESOLVED],
    }
