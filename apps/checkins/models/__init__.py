from .checkin import Checkin

__all__ = ['Checkin']
