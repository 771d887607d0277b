"""Presentation surfaces for an Event"""
from .presenter import ConsolePresenter, NUM_PEOPLE_FELT_IT

__all__ = ['ConsolePresenter', 'NUM_PEOPLE_FELT_IT']
