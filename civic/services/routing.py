"""
Assignment Routing

Binds issues to the regional official responsible for their zone.
"""

import logging
from civic.errors import InvalidTargetError, NotFoundError, UnauthorizedError
from civic.models import Role, Zone
from civic.repositories import issue_repository

logger = logging.getLogger(__name__)


def route(zone, directory):
    """Return the id of the official responsible for `zone`, or None.

    No official for a zone is a normal outcome; the issue simply stays
    unassigned.
    """
    if zone == Zone.UNASSIGNED:
        return None
    official = directory.find_by_role_and_zone(Role.REGIONAL_ADMIN, zone)
    return official.id if official is not None else None


def reassign(issue, official_id, requester_role, directory):
    """Manually bind an issue to an official.

    The issue's zone is overwritten with the official's zone, even when
    that disagrees with the issue's coordinates.
    """
    if requester_role != Role.ADMIN:
        role = requester_role.name if requester_role is not None else 'NONE'
        raise UnauthorizedError(f'Only ADMIN may reassign issues; you are signed in with role {role}.')

    official = directory.find_by_id(official_id)
    if official is None:
        raise NotFoundError('Regional admin', official_id)
    if official.role != Role.REGIONAL_ADMIN:
        raise InvalidTargetError('Target user is not a regional admin')

    issue.assigned_to_id = official.id
    issue.zone = official.zone if official.zone is not None else Zone.UNASSIGNED
    logger.info('Issue #%s manually assigned to %s (zone now %s)',
                issue.id, official.email, issue.zone.name)
    return issue


def unassign_all_for(official_id, issues=issue_repository):
    """Clear the assignee on every issue bound to an official.

    Zones are left as they are. Returns the number of issues changed.
    """
    assigned = issues.find_by_assignee(official_id)
    for issue in assigned:
        issue.assigned_to_id = None
        issues.save(issue)
    logger.info('Unassigned %d issue(s) from official #%s', len(assigned), official_id)
    return len(assigned)
