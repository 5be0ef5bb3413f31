"""
Domain Errors

Service code raises these; the handlers registered by
`register_error_handlers` translate them into the JSON envelope.
"""

import logging
from werkzeug.exceptions import HTTPException
from civic.responses import error_response

logger = logging.getLogger(__name__)


class CivicError(Exception):
    """Base class for errors that are safe to show to the client."""
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    @property
    def payload(self):
        return None


class NotFoundError(CivicError):
    status_code = 404

    def __init__(self, entity, entity_id):
        super().__init__(f'{entity} not found with id: {entity_id}')
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(CivicError):
    status_code = 409


class DuplicateEmailError(ConflictError):

    def __init__(self, email):
        super().__init__(f'Email already registered: {email}')
        self.email = email


class ZoneTakenError(ConflictError):
    """A second regional official was requested for a covered zone."""

    def __init__(self, zone, official_email):
        super().__init__(f'Zone {zone.name} already has a regional admin: {official_email}')
        self.zone = zone


class UnauthorizedError(CivicError):
    status_code = 403


class InvalidTargetError(CivicError):
    status_code = 400


class ValidationError(CivicError):
    """Malformed input. `errors` maps each offending field to its message."""
    status_code = 400

    def __init__(self, errors):
        super().__init__('Validation failed')
        self.errors = dict(errors)

    @property
    def payload(self):
        return self.errors


def register_error_handlers(app):
    """Attach JSON error handlers to the Flask app."""

    @app.errorhandler(CivicError)
    def handle_civic_error(exc):
        if exc.status_code == 403:
            logger.warning('Unauthorized: %s', exc.message)
        else:
            logger.info('%s: %s', type(exc).__name__, exc.message)
        return error_response(exc.message, exc.status_code, exc.payload)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return error_response(exc.description, exc.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        logger.exception('Unexpected error: %s', exc)
        return error_response('An unexpected error occurred. Please try again later.', 500)
