"""
Civic Issue Routing Service - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os
from flask import Flask
from civic.extensions import db, login_manager
from civic.config import Config
from civic.errors import register_error_handlers
from civic.responses import error_response


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)

    # Register blueprints
    from civic.auth import auth_bp
    from civic.issues import issues_bp
    from civic.admin import admin_bp
    from civic.regional import regional_bp
    from civic.notifications import notifications_bp

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(issues_bp, url_prefix='/api')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(regional_bp, url_prefix='/api/regional')
    app.register_blueprint(notifications_bp, url_prefix='/api/notifications')

    register_error_handlers(app)

    # User loader for Flask-Login
    @login_manager.user_loader
    def load_user(user_id):
        from civic.models import User
        return db.session.get(User, int(user_id))

    # API clients get a JSON 401 instead of a redirect
    @login_manager.unauthorized_handler
    def unauthorized():
        return error_response('Authentication required. Please log in.', 401)

    # Create database tables
    with app.app_context():
        os.makedirs(app.config['INSTANCE_DIR'], exist_ok=True)
        db.create_all()
        _ensure_default_data(app)

    return app


def _ensure_default_data(app):
    """Ensure the bootstrap administrator account exists."""
    from civic.services.accounts import ensure_admin_account

    ensure_admin_account(
        app.config['ADMIN_NAME'],
        app.config['ADMIN_EMAIL'],
        app.config['ADMIN_PASSWORD'],
    )
