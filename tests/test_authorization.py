from types import SimpleNamespace

import pytest

from civic.errors import UnauthorizedError
from civic.models import Role, Zone
from civic.services.authorization import can_update_status, ensure_can_update_status, require_role


def actor(role, zone=None, id=1):
    return SimpleNamespace(id=id, role=role, zone=zone)


def issue(zone, assigned_to_id=None, id=10):
    return SimpleNamespace(id=id, zone=zone, assigned_to_id=assigned_to_id)


def test_admin_may_update_anything():
    admin = actor(Role.ADMIN)
    assert can_update_status(admin, issue(Zone.EAST))
    assert can_update_status(admin, issue(Zone.UNASSIGNED, assigned_to_id=99))


def test_regional_admin_in_own_zone():
    west = actor(Role.REGIONAL_ADMIN, Zone.WEST, id=5)
    assert can_update_status(west, issue(Zone.WEST))
    assert can_update_status(west, issue(Zone.WEST, assigned_to_id=6))


def test_regional_admin_outside_zone_is_denied():
    west = actor(Role.REGIONAL_ADMIN, Zone.WEST, id=5)
    assert not can_update_status(west, issue(Zone.EAST, assigned_to_id=6))
    assert not can_update_status(west, issue(Zone.EAST))


def test_regional_admin_assigned_issue_in_other_zone():
    west = actor(Role.REGIONAL_ADMIN, Zone.WEST, id=5)
    assert can_update_status(west, issue(Zone.EAST, assigned_to_id=5))


def test_citizen_is_always_denied():
    citizen = actor(Role.CITIZEN, id=3)
    assert not can_update_status(citizen, issue(Zone.CENTRAL))
    assert not can_update_status(citizen, issue(Zone.CENTRAL, assigned_to_id=3))


def test_denial_message_names_the_actors_zone():
    west = actor(Role.REGIONAL_ADMIN, Zone.WEST, id=5)
    with pytest.raises(UnauthorizedError) as exc:
        ensure_can_update_status(west, issue(Zone.EAST))
    assert 'WEST' in exc.value.message
    assert exc.value.status_code == 403


def test_citizen_denial_names_role():
    with pytest.raises(UnauthorizedError) as exc:
        ensure_can_update_status(actor(Role.CITIZEN), issue(Zone.EAST))
    assert 'CITIZEN' in exc.value.message


def test_require_role():
    require_role(actor(Role.ADMIN), Role.ADMIN)
    with pytest.raises(UnauthorizedError) as exc:
        require_role(actor(Role.REGIONAL_ADMIN, Zone.SOUTH), Role.ADMIN)
    assert 'SOUTH' in exc.value.message
