"""
Auth Blueprint

Session-based sign-in shared by citizens, regional officials and
administrators.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from civic.auth import routes  # noqa: E402, F401
