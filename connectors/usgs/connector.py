"""
USGS connector for felt-report earthquake data.

Queries the FDSN event service and maps the first returned feature to an Event.
"""

import json
import math
from typing import Dict, Any, Optional
from urllib.parse import urlencode

from ..base import BaseConnector
from shared import config as settings
from shared.models.models import Event
from shared.utils.intensity import perceived_strength


def build_request_url(base_url: str, params: Dict[str, Any]) -> str:
    """Join the query endpoint with its query parameters."""
    if not params:
        return base_url
    return f"{base_url}?{urlencode(params)}"


class USGSConnector(BaseConnector):
    """
    USGS connector for a single felt earthquake.

    Issues one request against the FDSN event service and keeps only the
    first feature of the FeatureCollection.
    """

    def __init__(self, config: Dict[str, Any]):
        super().__init__('usgs', config)

        # Configuration
        if config.get('request_url'):
            self.request_url = config['request_url']
        elif config.get('params'):
            params = dict(settings.USGS_QUERY_PARAMS)
            params.update(config['params'])
            self.request_url = build_request_url(settings.USGS_QUERY_URL, params)
        else:
            self.request_url = settings.USGS_REQUEST_URL

    def extract_feature_from_json(self, earthquake_json: Optional[str]) -> Optional[Event]:
        """
        Convert a USGS GeoJSON response into an Event.

        Only features[0].properties.{mag, place, title, felt, cdi} are read.

        Returns:
            Event for the first feature, or None when the text is not a usable
            FeatureCollection
        """
        if not earthquake_json:
            return None

        try:
            data = json.loads(earthquake_json)
        except (ValueError, TypeError, RecursionError) as e:
            self.logger.warning(f"Problem parsing the earthquake JSON results: {e}")
            return None

        if not isinstance(data, dict):
            self.logger.warning(f"Unexpected top-level JSON type: {type(data).__name__}")
            return None

        features = data.get('features')
        if not isinstance(features, list) or not features:
            self.logger.info("No earthquake features in response")
            return None

        first_feature = features[0]
        props = first_feature.get('properties') if isinstance(first_feature, dict) else None
        if not isinstance(props, dict):
            self.logger.warning("First feature has no properties object")
            return None

        title = self._event_title(props)
        if title is None:
            self.logger.warning(f"Feature {first_feature.get('id', '')} has no magnitude/place or title")
            return None

        return Event(
            title=title,
            num_of_people=self._felt_count(props.get('felt')),
            perceived_strength=perceived_strength(props.get('cdi')),
        )

    def _event_title(self, props: Dict[str, Any]) -> Optional[str]:
        """Title combines magnitude and place, falling back to the USGS title."""
        magnitude = props.get('mag')
        place = props.get('place')

        if magnitude is not None and not isinstance(magnitude, bool) and place:
            try:
                value = float(magnitude)
            except (TypeError, ValueError):
                value = None
            if value is not None and math.isfinite(value):
                return f"M {value:.1f} - {place}"

        title = props.get('title')
        if isinstance(title, str) and title:
            return title
        return None

    @staticmethod
    def _felt_count(value: Any) -> int:
        """Felt reports; absent or malformed values count as zero."""
        if value is None or isinstance(value, bool):
            return 0
        try:
            return max(int(float(value)), 0)
        except (TypeError, ValueError, OverflowError):
            return 0

    def fetch_earthquake_data(self, url: Optional[str] = None) -> Optional[Event]:
        """
        Query USGS and return the first earthquake as an Event.

        The parse step only runs when the request produced a body.
        """
        request_url = url if url is not None else self.request_url

        json_response = self.fetch_text(request_url)
        if json_response is None:
            return None

        event = self.extract_feature_from_json(json_response)
        if event is not None:
            self.logger.info(f"Fetched {event} from USGS")
        return event

    def fetch(self) -> Optional[Event]:
        """
        Fetch the first earthquake from the configured USGS query.
        """
        return self.fetch_earthquake_data()
