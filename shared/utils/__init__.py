"""Shared helpers"""
from .intensity import STRENGTH_THRESHOLDS, perceived_strength

__all__ = ['STRENGTH_THRESHOLDS', 'perceived_strength']
