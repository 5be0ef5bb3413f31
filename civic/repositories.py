"""
Persistence collaborators

Thin query wrappers over the Flask-SQLAlchemy session. They add objects to
the session but never commit; the service operation that owns the unit of
work commits once at the end.
"""

from civic.errors import NotFoundError
from civic.extensions import db
from civic.models import Issue, IssueStatus, Notification, User

# Largest id a 64-bit INTEGER primary key can hold
MAX_ID = 2 ** 63 - 1


def _storable_id(value):
    return isinstance(value, int) and -MAX_ID - 1 <= value <= MAX_ID


class IssueRepository:
    """Issue persistence."""

    def save(self, issue):
        db.session.add(issue)
        return issue

    def find_by_id(self, issue_id, for_update=False):
        if not _storable_id(issue_id):
            return None
        # Row lock for read-modify-write sequences; ignored by SQLite.
        return db.session.get(Issue, issue_id, with_for_update=True if for_update else None)

    def find_all(self):
        return Issue.query.order_by(Issue.created_at.desc(), Issue.id.desc()).all()

    def find_by_creator(self, user_id):
        return Issue.query.filter_by(created_by_id=user_id)\
            .order_by(Issue.created_at.desc(), Issue.id.desc()).all()

    def find_by_zone(self, zone):
        return Issue.query.filter_by(zone=zone)\
            .order_by(Issue.created_at.desc(), Issue.id.desc()).all()

    def find_by_assignee(self, user_id):
        return Issue.query.filter_by(assigned_to_id=user_id).order_by(Issue.id).all()

    def find_unassigned(self):
        return Issue.query.filter(Issue.assigned_to_id.is_(None))\
            .order_by(Issue.created_at.desc(), Issue.id.desc()).all()

    def count_by_status(self, zone=None):
        """Issue counts keyed by status, optionally limited to one zone."""
        query = db.session.query(Issue.status, db.func.count(Issue.id))
        if zone is not None:
            query = query.filter(Issue.zone == zone)
        counts = {status: 0 for status in IssueStatus}
        for status, count in query.group_by(Issue.status).all():
            counts[status] = count
        return counts

    def delete(self, issue):
        db.session.delete(issue)


class UserDirectory:
    """Lookup of accounts by identity, email, role and zone."""

    def find_by_email(self, email):
        return User.query.filter_by(email=email).first()

    def find_by_id(self, user_id):
        if not _storable_id(user_id):
            return None
        return db.session.get(User, user_id)

    def find_by_role(self, role):
        return User.query.filter_by(role=role).order_by(User.id).all()

    def find_by_role_and_zone(self, role, zone):
        # Most recently created account wins if a zone is ever covered twice
        return User.query.filter_by(role=role, zone=zone).order_by(User.id.desc()).first()

    def exists_by_email(self, email):
        return db.session.query(User.query.filter_by(email=email).exists()).scalar()


class NotificationSink:
    """Stores notifications; delivery is up to the client polling for them."""

    def record(self, recipient_id, message):
        notification = Notification(recipient_id=recipient_id, message=message)
        db.session.add(notification)
        return notification

    def for_recipient(self, user_id):
        return Notification.query.filter_by(recipient_id=user_id)\
            .order_by(Notification.created_at.desc(), Notification.id.desc()).all()

    def mark_read(self, notification_id, user_id):
        notification = db.session.get(Notification, notification_id) if _storable_id(notification_id) else None
        # Another user's notification is reported as missing
        if notification is None or notification.recipient_id != user_id:
            raise NotFoundError('Notification', notification_id)
        notification.read = True
        return notification

    def delete_for_recipient(self, user_id):
        return Notification.query.filter_by(recipient_id=user_id).delete()


issue_repository = IssueRepository()
user_directory = UserDirectory()
notification_sink = NotificationSink()
