"""Data models"""
from .models import Event

__all__ = [
    'Event',
]
