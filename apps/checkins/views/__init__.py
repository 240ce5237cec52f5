"""
Check-in views module.
"""
from .checkin_views import CheckinView

__all__ = ['CheckinView']
