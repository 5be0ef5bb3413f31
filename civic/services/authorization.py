"""
Authorization Guard

Decides who may change an issue's status, and gates role-restricted
operations. Actors and issues are read by attribute only (`role`, `zone`,
`id` / `zone`, `assigned_to_id`), so any object with those fields works.
"""

import logging
from civic.errors import UnauthorizedError
from civic.models import Role

logger = logging.getLogger(__name__)


def describe_scope(actor):
    """Short description of what an actor is responsible for."""
    role = actor.role.name if actor.role is not None else 'NONE'
    if actor.role == Role.REGIONAL_ADMIN:
        zone = actor.zone.name if actor.zone is not None else 'NONE'
        return f'role {role}, zone {zone}'
    return f'role {role}'


def can_update_status(actor, issue):
    """Pure permission check for a status change.

    ADMIN may update any issue. A REGIONAL_ADMIN may update issues in their
    own zone or issues assigned to them directly. Everyone else is denied.
    """
    if actor.role == Role.ADMIN:
        return True

    if actor.role == Role.REGIONAL_ADMIN:
        in_their_zone = actor.zone is not None and issue.zone == actor.zone
        assigned_to_them = issue.assigned_to_id is not None and issue.assigned_to_id == actor.id
        return in_their_zone or assigned_to_them

    return False


def ensure_can_update_status(actor, issue):
    """Raise UnauthorizedError unless `can_update_status` allows the change."""
    if can_update_status(actor, issue):
        return

    if actor.role == Role.REGIONAL_ADMIN:
        zone = actor.zone.name if actor.zone is not None else 'NONE'
        logger.warning('Regional admin #%s tried to update issue #%s outside their zone %s',
                       actor.id, issue.id, zone)
        raise UnauthorizedError(f'You can only update issues in your zone: {zone}')

    raise UnauthorizedError(
        f'You do not have permission to update issue status ({describe_scope(actor)}).')


def require_role(actor, *roles):
    """Raise UnauthorizedError unless the actor holds one of `roles`."""
    if actor.role in roles:
        return
    allowed = ' or '.join(role.name for role in roles)
    raise UnauthorizedError(
        f'This operation requires {allowed}; you are signed in with {describe_scope(actor)}.')
