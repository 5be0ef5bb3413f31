"""
User Model
"""

import enum
from flask_login import UserMixin
from civic.extensions import db
from civic.models.base import utcnow
from civic.models.zone import Zone


class Role(enum.Enum):
    CITIZEN = 'CITIZEN'
    REGIONAL_ADMIN = 'REGIONAL_ADMIN'
    ADMIN = 'ADMIN'


class User(UserMixin, db.Model):
    """Account for citizens, regional officials and administrators"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.Enum(Role), nullable=False, default=Role.CITIZEN)
    # Only meaningful for regional officials
    zone = db.Column(db.Enum(Zone), nullable=True, index=True)
    created_at = db.Column(db.DateTime, default=utcnow)

    def __repr__(self):
        return f'<User {self.email}>'
