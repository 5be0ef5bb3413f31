"""
Services Package

Exports the pure decision functions for easy importing.
"""

from civic.services.zoning import classify, describe, list_zones
from civic.services.authorization import can_update_status, ensure_can_update_status, require_role
from civic.services.routing import route, reassign, unassign_all_for

__all__ = [
    'classify',
    'describe',
    'list_zones',
    'can_update_status',
    'ensure_can_update_status',
    'require_role',
    'route',
    'reassign',
    'unassign_all_for',
]
