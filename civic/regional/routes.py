"""
Regional Routes
"""

from flask_login import current_user
from civic.auth.decorators import roles_required
from civic.models import Role
from civic.regional import regional_bp
from civic.responses import api_response
from civic.schemas import issue_to_dict
from civic.services import issues


@regional_bp.route('/issues')
@roles_required(Role.ADMIN, Role.REGIONAL_ADMIN)
def zone_issues():
    """Issues in the caller's zone"""
    found = issues.list_zone_issues(current_user)
    return api_response([issue_to_dict(i, include_comments=False) for i in found])


@regional_bp.route('/dashboard/stats')
@roles_required(Role.ADMIN, Role.REGIONAL_ADMIN)
def zone_stats():
    """Status counts for the caller's zone"""
    return api_response(issues.zone_stats(current_user))
