"""
Admin Routes

All routes require the ADMIN role.
"""

from flask import request
from flask_login import current_user
from civic.admin import admin_bp
from civic.auth.decorators import roles_required
from civic.models import Role
from civic.responses import api_response
from civic.schemas import issue_to_dict, official_to_dict, validate_assignment_payload
from civic.services import issues, officials


@admin_bp.route('/regional-admins', methods=['POST'])
@roles_required(Role.ADMIN)
def create_regional_admin():
    """Create a regional admin responsible for one zone"""
    official = officials.create_official(request.get_json(silent=True))
    return api_response(official_to_dict(official, officials.zone_counts(official)),
                        'Regional admin created successfully', 201)


@admin_bp.route('/regional-admins')
@roles_required(Role.ADMIN)
def list_regional_admins():
    """All regional admins with issue counts for their zone"""
    return api_response([official_to_dict(o, counts) for o, counts in officials.list_officials()])


@admin_bp.route('/regional-admins/<int:official_id>', methods=['DELETE'])
@roles_required(Role.ADMIN)
def delete_regional_admin(official_id):
    """Remove a regional admin; their issues become unassigned"""
    officials.remove_official(official_id)
    return api_response(message='Regional admin deleted')


@admin_bp.route('/issues/unassigned')
@roles_required(Role.ADMIN)
def unassigned_issues():
    return api_response([issue_to_dict(i, include_comments=False) for i in issues.list_unassigned()])


@admin_bp.route('/issues/<int:issue_id>/assign', methods=['PUT'])
@roles_required(Role.ADMIN)
def assign_issue(issue_id):
    """Manually assign an issue; the issue takes the official's zone"""
    official_id = validate_assignment_payload(request.get_json(silent=True))
    issue = issues.assign_issue(issue_id, official_id, current_user)
    data = issue_to_dict(issue)
    return api_response(data, f"Issue assigned to {data['assigned_to']['name']}")
