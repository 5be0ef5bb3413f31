"""
Request validation and response serialization

Validators collect every field problem before raising, so the client gets
the whole list at once.
"""

import math
from civic.errors import ValidationError
from civic.models import IssueStatus, Zone
from civic.repositories import user_directory
from civic.services.zoning import describe

MIN_PASSWORD_LENGTH = 6


def _required_text(payload, field, label, errors, max_length=None):
    value = payload.get(field)
    if not isinstance(value, str) or not value.strip():
        errors[field] = f'{label} is required'
        return None
    value = value.strip()
    if max_length is not None and len(value) > max_length:
        errors[field] = f'{label} must be at most {max_length} characters'
        return None
    return value


def _optional_coordinate(payload, field, label, errors):
    value = payload.get(field)
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        errors[field] = f'{label} must be a number'
        return None
    try:
        value = float(value)
    except OverflowError:
        value = math.inf
    if not math.isfinite(value):
        errors[field] = f'{label} must be a finite number'
        return None
    return value


def _email(payload, errors):
    email = _required_text(payload, 'email', 'Email', errors, max_length=120)
    if email is not None and '@' not in email:
        errors['email'] = 'Please provide a valid email address'
        return None
    return email.lower() if email else email


def _password(payload, errors):
    password = payload.get('password')
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        errors['password'] = f'Password must be at least {MIN_PASSWORD_LENGTH} characters long'
        return None
    return password


def ensure_object(payload):
    if not isinstance(payload, dict):
        raise ValidationError({'body': 'Request body must be a JSON object'})
    return payload


def validate_issue_payload(payload):
    ensure_object(payload)
    errors = {}
    data = {
        'title': _required_text(payload, 'title', 'Title', errors, max_length=200),
        'description': _required_text(payload, 'description', 'Description', errors),
        'category': _required_text(payload, 'category', 'Category', errors, max_length=100),
        'latitude': _optional_coordinate(payload, 'latitude', 'Latitude', errors),
        'longitude': _optional_coordinate(payload, 'longitude', 'Longitude', errors),
        'image_url': None,
    }
    image_url = payload.get('image_url')
    if image_url is not None:
        if not isinstance(image_url, str) or len(image_url) > 500:
            errors['image_url'] = 'Image URL must be a string of at most 500 characters'
        else:
            data['image_url'] = image_url.strip() or None
    if errors:
        raise ValidationError(errors)
    return data


def parse_status(value):
    """Accept an IssueStatus or its name."""
    if isinstance(value, IssueStatus):
        return value
    if isinstance(value, str) and value.strip().upper() in IssueStatus.__members__:
        return IssueStatus[value.strip().upper()]
    allowed = ', '.join(IssueStatus.__members__)
    if value is None:
        raise ValidationError({'status': 'Status is required'})
    raise ValidationError({'status': f'Status must be one of: {allowed}'})


def parse_zone(value, errors, field='zone'):
    if isinstance(value, Zone):
        zone = value
    elif isinstance(value, str) and value.strip().upper() in Zone.__members__:
        zone = Zone[value.strip().upper()]
    else:
        errors[field] = 'Zone is required' if value is None else \
            f'Zone must be one of: {", ".join(Zone.__members__)}'
        return None
    if zone == Zone.UNASSIGNED:
        errors[field] = 'A regional admin must be responsible for a real zone'
        return None
    return zone


def validate_registration_payload(payload):
    ensure_object(payload)
    errors = {}
    data = {
        'name': _required_text(payload, 'name', 'Name', errors, max_length=120),
        'email': _email(payload, errors),
        'password': _password(payload, errors),
    }
    if errors:
        raise ValidationError(errors)
    return data


def validate_official_payload(payload):
    ensure_object(payload)
    errors = {}
    data = {
        'name': _required_text(payload, 'name', 'Name', errors, max_length=120),
        'email': _email(payload, errors),
        'password': _password(payload, errors),
        'zone': parse_zone(payload.get('zone'), errors),
    }
    if errors:
        raise ValidationError(errors)
    return data


def validate_login_payload(payload):
    ensure_object(payload)
    errors = {}
    email = _required_text(payload, 'email', 'Email', errors)
    password = payload.get('password')
    if not isinstance(password, str) or not password:
        errors['password'] = 'Password is required'
    if errors:
        raise ValidationError(errors)
    return email.lower(), password


def validate_assignment_payload(payload):
    ensure_object(payload)
    admin_id = payload.get('admin_id')
    if isinstance(admin_id, bool) or not isinstance(admin_id, int):
        raise ValidationError({'admin_id': 'Admin ID is required'})
    return admin_id


# -------------------------------------------------------------------------
# Serialization
# -------------------------------------------------------------------------

def _isoformat(value):
    return value.isoformat() if value is not None else None


def user_summary(user_id):
    if user_id is None:
        return None
    user = user_directory.find_by_id(user_id)
    if user is None:
        return {'id': user_id, 'name': None, 'email': None}
    return {'id': user.id, 'name': user.name, 'email': user.email}


def user_to_dict(user):
    return {
        'id': user.id,
        'name': user.name,
        'email': user.email,
        'role': user.role.name,
        'zone': user.zone.name if user.zone is not None else None,
    }


def comment_to_dict(comment):
    author = user_summary(comment.author_id)
    return {
        'id': comment.id,
        'text': comment.text,
        'created_at': _isoformat(comment.created_at),
        'user_id': comment.author_id,
        'user_name': author['name'] if author else None,
    }


def issue_to_dict(issue, include_comments=True):
    data = {
        'id': issue.id,
        'title': issue.title,
        'description': issue.description,
        'category': issue.category,
        'status': issue.status.name,
        'image_url': issue.image_url,
        'latitude': issue.latitude,
        'longitude': issue.longitude,
        'created_at': _isoformat(issue.created_at),
        'created_by': user_summary(issue.created_by_id),
        'zone': issue.zone.name,
        'zone_description': describe(issue.zone),
        'assigned_to': user_summary(issue.assigned_to_id),
    }
    if include_comments:
        data['comments'] = [comment_to_dict(c) for c in issue.comments]
    return data


def official_to_dict(official, counts):
    return {
        'id': official.id,
        'name': official.name,
        'email': official.email,
        'zone': official.zone.name if official.zone is not None else None,
        'zone_description': describe(official.zone) if official.zone is not None else 'No zone assigned',
        'total_issues': sum(counts.values()),
        'pending_issues': counts[IssueStatus.PENDING],
        'resolved_issues': counts[IssueStatus.RESOLVED],
    }


def notification_to_dict(notification):
    return {
        'id': notification.id,
        'message': notification.message,
        'read': notification.read,
        'created_at': _isoformat(notification.created_at),
    }
