"""
Issue Routes

Reporting, browsing and updating civic issues.
"""

from flask import request
from flask_login import login_required, current_user
from civic.auth.decorators import roles_required
from civic.issues import issues_bp
from civic.models import Role
from civic.responses import api_response
from civic.schemas import comment_to_dict, ensure_object, issue_to_dict
from civic.services import issues, list_zones


@issues_bp.route('/zones')
@login_required
def zones():
    """Every zone with its human-readable label"""
    return api_response(list_zones())


@issues_bp.route('/issues')
@login_required
def list_issues():
    """All issues, newest first; `?mine=true` limits to the caller's reports"""
    mine = request.args.get('mine', 'false').lower() in ('1', 'true', 'yes')
    found = issues.list_issues_for(current_user.id) if mine else issues.list_issues()
    return api_response([issue_to_dict(i) for i in found])


@issues_bp.route('/issues/<int:issue_id>')
@login_required
def get_issue(issue_id):
    return api_response(issue_to_dict(issues.get_issue(issue_id)))


@issues_bp.route('/issues', methods=['POST'])
@login_required
def create_issue():
    issue = issues.create_issue(request.get_json(silent=True), current_user.id)
    return api_response(issue_to_dict(issue), 'Issue created successfully', 201)


@issues_bp.route('/issues/<int:issue_id>/status', methods=['PUT'])
@roles_required(Role.ADMIN, Role.REGIONAL_ADMIN)
def update_status(issue_id):
    """Change status; regional admins are limited to their zone or assignments"""
    payload = ensure_object(request.get_json(silent=True))
    issue = issues.update_status(issue_id, payload.get('status'), current_user)
    return api_response(issue_to_dict(issue), 'Issue status updated')


@issues_bp.route('/issues/<int:issue_id>', methods=['DELETE'])
@roles_required(Role.ADMIN)
def delete_issue(issue_id):
    issues.delete_issue(issue_id)
    return api_response(message='Issue deleted successfully')


@issues_bp.route('/issues/<int:issue_id>/comments', methods=['POST'])
@login_required
def add_comment(issue_id):
    payload = ensure_object(request.get_json(silent=True))
    comment = issues.add_comment(issue_id, current_user.id, payload.get('text'))
    return api_response(comment_to_dict(comment), 'Comment added', 201)
