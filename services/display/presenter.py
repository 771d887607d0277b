"""Console presentation of a single earthquake"""
import sys
from typing import TextIO, Optional

from shared.models.models import Event

NUM_PEOPLE_FELT_IT = "{} people felt it"


class ConsolePresenter:
    """Writes the title, felt count and perceived strength of an Event."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def update_ui(self, earthquake: Event) -> None:
        lines = [
            earthquake.title,
            NUM_PEOPLE_FELT_IT.format(earthquake.num_of_people),
            earthquake.perceived_strength,
        ]
        self.stream.write("\n".join(lines) + "\n")
        self.stream.flush()
