"""
Role Decorator

Gates a view on the signed-in user's role. The role check itself lives in
`civic.services.authorization.require_role`, so the denial carries the
actor's scope in its message.
"""

from functools import wraps
from flask_login import current_user
from civic.extensions import login_manager
from civic.services.authorization import require_role


def roles_required(*roles):
    """Decorator to ensure the request is from a signed-in user holding one of `roles`.

    - Anonymous requests get the login manager's 401 response
    - Signed-in users with another role get a 403 via UnauthorizedError
    """
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            if not current_user.is_authenticated:
                return login_manager.unauthorized()
            require_role(current_user, *roles)
            return f(*args, **kwargs)
        return wrapper
    return decorator
