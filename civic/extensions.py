"""
Flask Extensions

Accounts are session-based through Flask-Login; every role shares the
same login flow and is told apart by the `role` column.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for citizens, officials and administrators
login_manager = LoginManager()
