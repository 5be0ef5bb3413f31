"""
Account Services

Citizen registration, credential checks and the bootstrap administrator.
"""

import logging
from flask import current_app
from werkzeug.security import generate_password_hash, check_password_hash
from civic.errors import DuplicateEmailError
from civic.extensions import db
from civic.models import Role, User
from civic.repositories import user_directory
from civic.schemas import validate_registration_payload

logger = logging.getLogger(__name__)


def _hash(password):
    return generate_password_hash(password, method=current_app.config['PASSWORD_HASH_METHOD'])


def register_citizen(payload):
    data = validate_registration_payload(payload)
    if user_directory.exists_by_email(data['email']):
        raise DuplicateEmailError(data['email'])

    user = User(name=data['name'], email=data['email'],
                password_hash=_hash(data['password']), role=Role.CITIZEN)
    try:
        db.session.add(user)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    logger.info('Citizen account %s registered', user.email)
    return user


def authenticate(email, password):
    """Return the matching user, or None when the credentials are wrong."""
    user = user_directory.find_by_email(email)
    if user and check_password_hash(user.password_hash, password):
        return user
    return None


def ensure_admin_account(name, email, password):
    """Create the administrator account when no account uses `email`."""
    email = email.lower()
    if user_directory.exists_by_email(email):
        return False
    try:
        db.session.add(User(name=name, email=email, password_hash=_hash(password), role=Role.ADMIN))
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    logger.info('Created administrator account %s', email)
    return True
