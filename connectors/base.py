"""
Base connector class for all data source connectors.

All connectors must:
1. Inherit from BaseConnector
2. Implement the fetch() method to return a single Event (or None)
3. Use fetch_text() for outbound HTTP so failures are handled uniformly
"""

import abc
import logging
from typing import Dict, Any, Optional

import requests
from urllib3.exceptions import LocationParseError

from shared import config as settings
from shared.models.models import Event


logger = logging.getLogger(__name__)


class BaseConnector(abc.ABC):
    """
    Abstract base class for all data source connectors.

    Each connector is responsible for fetching data from a specific source
    and converting it to an Event.
    """

    def __init__(self, name: str, config: Dict[str, Any]):
        """
        Initialize connector.

        Args:
            name: Connector name (used for the logger name)
            config: Configuration dictionary for this connector
        """
        self.name = name
        self.config = config
        self.logger = logging.getLogger(f"{__name__}.{name}")

        self.connect_timeout = float(config.get('connect_timeout', settings.HTTP_CONNECT_TIMEOUT))
        self.read_timeout = float(config.get('read_timeout', settings.HTTP_READ_TIMEOUT))
        self.user_agent = config.get('user_agent')

    @abc.abstractmethod
    def fetch(self) -> Optional[Event]:
        """
        Fetch one event from the data source.

        Returns:
            Event, or None when the source yields nothing usable
        """
        pass

    def fetch_text(self, url: Optional[str]) -> Optional[str]:
        """
        Perform a single GET request and return the response body.

        No retries. Every failure is logged and reported as None.

        Args:
            url: Absolute http(s) URL

        Returns:
            Response text on HTTP 200, otherwise None
        """
        if not url:
            self.logger.error("No URL given, skipping request")
            return None

        headers = {'User-Agent': self.user_agent} if self.user_agent else None

        try:
            response = requests.get(
                url,
                headers=headers,
                timeout=(self.connect_timeout, self.read_timeout),
            )
        except (requests.RequestException, LocationParseError, ValueError) as e:
            # Timeouts, connection errors and malformed URLs or hosts
            self.logger.error(f"Problem retrieving {url}: {e}")
            return None

        if response.status_code != 200:
            self.logger.error(f"Error response code: {response.status_code} for {url}")
            return None

        if response.encoding is None:
            response.encoding = 'utf-8'
        return response.text
