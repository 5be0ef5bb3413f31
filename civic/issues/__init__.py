"""
Issues Blueprint
"""

from flask import Blueprint

issues_bp = Blueprint('issues', __name__)

from civic.issues import routes  # noqa: E402, F401
