"""
Issue and Comment Models
"""

import enum
from civic.extensions import db
from civic.models.base import utcnow
from civic.models.zone import Zone


class IssueStatus(enum.Enum):
    PENDING = 'PENDING'
    IN_PROGRESS = 'IN_PROGRESS'
    RESOLVED = 'RESOLVED'


class Issue(db.Model):
    """Civic issue reported by a citizen"""
    __tablename__ = 'issues'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(100), nullable=False)
    status = db.Column(db.Enum(IssueStatus), nullable=False, default=IssueStatus.PENDING, index=True)
    image_url = db.Column(db.String(500))

    latitude = db.Column(db.Float)
    longitude = db.Column(db.Float)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False, index=True)

    # Users are referenced by id only
    created_by_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    zone = db.Column(db.Enum(Zone), nullable=False, default=Zone.UNASSIGNED, index=True)
    assigned_to_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True, index=True)

    comments = db.relationship('Comment', backref='issue', lazy=True,
                               cascade='all, delete-orphan', order_by='Comment.id')

    def __repr__(self):
        return f'<Issue #{self.id} {self.zone}>'


class Comment(db.Model):
    """Comment attached to an issue"""
    __tablename__ = 'comments'

    id = db.Column(db.Integer, primary_key=True)
    text = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    issue_id = db.Column(db.Integer, db.ForeignKey('issues.id'), nullable=False, index=True)
    # Cleared when the author account is removed
    author_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=True, index=True)

    def __repr__(self):
        return f'<Comment #{self.id} Issue:{self.issue_id}>'
