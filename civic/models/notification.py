"""
Notification Model
"""

from civic.extensions import db
from civic.models.base import utcnow


class Notification(db.Model):
    """Message left for a user when one of their issues changes"""
    __tablename__ = 'notifications'

    id = db.Column(db.Integer, primary_key=True)
    message = db.Column(db.String(500), nullable=False)
    recipient_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    read = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    def __repr__(self):
        return f'<Notification User:{self.recipient_id} read={self.read}>'
