"""
Auth Routes

Account registration and session handling using Flask-Login.
"""

from flask import request
from flask_login import login_user, logout_user, login_required, current_user
from civic.auth import auth_bp
from civic.responses import api_response, error_response
from civic.schemas import user_to_dict, validate_login_payload
from civic.services.accounts import authenticate, register_citizen


@auth_bp.route('/register', methods=['POST'])
def register():
    """Register a citizen account and sign it in"""
    user = register_citizen(request.get_json(silent=True))
    login_user(user)
    return api_response(user_to_dict(user), 'User registered successfully', 201)


@auth_bp.route('/login', methods=['POST'])
def login():
    """Sign in with email and password"""
    email, password = validate_login_payload(request.get_json(silent=True))
    user = authenticate(email, password)
    if user is None:
        return error_response('Invalid email or password', 401)

    login_user(user)
    return api_response(user_to_dict(user), 'Login successful')


@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    logout_user()
    return api_response(message='You have been logged out successfully.')


@auth_bp.route('/me')
@login_required
def me():
    return api_response(user_to_dict(current_user))
