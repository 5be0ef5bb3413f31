"""
Models Package

Exports all models for easy importing.
"""

from civic.models.zone import Zone
from civic.models.user import User, Role
from civic.models.issue import Issue, IssueStatus, Comment
from civic.models.notification import Notification

__all__ = ['Zone', 'User', 'Role', 'Issue', 'IssueStatus', 'Comment', 'Notification']
