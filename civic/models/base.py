"""
Shared model helpers
"""

from datetime import datetime, timezone


def utcnow():
    """Naive UTC timestamp, as stored by the DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
