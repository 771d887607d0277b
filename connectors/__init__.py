"""
Connectors package for earthquake data sources.

Each connector is responsible for:
1. Fetching data from its source
2. Converting the response to an Event
"""

from typing import Dict, Type
from .base import BaseConnector

from .usgs import USGSConnector, build_request_url

# Registry of all available connectors
CONNECTORS: Dict[str, Type[BaseConnector]] = {
    'usgs': USGSConnector,
}

__all__ = ['CONNECTORS', 'BaseConnector', 'USGSConnector', 'build_request_url']
