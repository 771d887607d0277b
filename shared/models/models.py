"""
Data models for the Did You Feel It client.

Defines the Event record produced from a USGS GeoJSON response and handed to
the presentation surface.
"""

import json
from dataclasses import dataclass, asdict, fields
from typing import Dict, Any

import logging
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Event:
    """
    A single earthquake as reported by people who felt it.

    Built once from the first feature of a USGS response and never mutated.
    """
    title: str  # "M 6.6 - 10km NW of Town"
    num_of_people: int = 0  # "felt" survey responses
    perceived_strength: str = "Not felt"  # label derived from "cdi"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Event':
        """Create event from dictionary."""
        valid_fields = {f.name for f in fields(cls)}

        # Filter out unknown fields
        filtered_data = {k: v for k, v in data.items() if k in valid_fields}

        if not filtered_data.get('title'):
            raise ValueError("Missing required fields: {'title'}")

        return cls(**filtered_data)

    @classmethod
    def from_json(cls, json_str: str) -> 'Event':
        """Create event from JSON string."""
        data = json.loads(json_str)
        return cls.from_dict(data)

    def __str__(self):
        return f"Event(title={self.title[:30]}, felt={self.num_of_people}, strength={self.perceived_strength})"
