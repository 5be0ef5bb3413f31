"""
Admin Blueprint

District-wide administration: regional officials and manual assignment.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from civic.admin import routes  # noqa: E402, F401
