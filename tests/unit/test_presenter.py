import io

from services.display import ConsolePresenter, NUM_PEOPLE_FELT_IT
from shared.models import Event


def test_update_ui_writes_three_fields():
    stream = io.StringIO()
    ConsolePresenter(stream).update_ui(Event("M 6.6 - 10km NW of Town", 157, "Severe"))

    assert stream.getvalue().splitlines() == [
        "M 6.6 - 10km NW of Town",
        "157 people felt it",
        "Severe",
    ]


def test_felt_template():
    assert NUM_PEOPLE_FELT_IT.format(0) == "0 people felt it"
