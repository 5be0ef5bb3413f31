"""
Regional Blueprint

Zone-scoped views for regional officials (administrators see all zones).
"""

from flask import Blueprint

regional_bp = Blueprint('regional', __name__)

from civic.regional import routes  # noqa: E402, F401
