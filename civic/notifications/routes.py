"""
Notification Routes

Users poll for the notifications left when their issues change status.
"""

from flask_login import login_required, current_user
from civic.extensions import db
from civic.notifications import notifications_bp
from civic.repositories import notification_sink
from civic.responses import api_response
from civic.schemas import notification_to_dict


@notifications_bp.route('')
@login_required
def my_notifications():
    """Notifications for the signed-in user, newest first"""
    found = notification_sink.for_recipient(current_user.id)
    return api_response([notification_to_dict(n) for n in found])


@notifications_bp.route('/<int:notification_id>/read', methods=['PUT'])
@login_required
def mark_read(notification_id):
    notification = notification_sink.mark_read(notification_id, current_user.id)
    try:
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    return api_response(notification_to_dict(notification))
