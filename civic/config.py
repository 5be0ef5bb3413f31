"""
Configuration settings for the Civic Issue Routing Service
"""
import os


class Config:
    """Flask application configuration"""

    # Flask secret key for sessions
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    INSTANCE_DIR = os.path.join(basedir, 'instance')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(INSTANCE_DIR, 'civic_issues.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'

    # Password hashing (werkzeug method string)
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256'

    # Bootstrap administrator, created on startup when missing
    ADMIN_NAME = os.environ.get('ADMIN_NAME') or 'District Administrator'
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL') or 'admin@civic.local'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'admin123'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'DEBUG'
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
