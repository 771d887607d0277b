"""
USGS connector for felt-report earthquake data.

Queries the FDSN event service and converts the first feature to an Event.
"""

from .connector import USGSConnector, build_request_url

__all__ = ['USGSConnector', 'build_request_url']
