"""One-shot background fetch task"""
from .earthquake_task import EarthquakeTask

__all__ = ['EarthquakeTask']
