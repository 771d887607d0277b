import asyncio
import io
from unittest import mock

import requests

import main
from services.display import ConsolePresenter


def test_main_presents_first_event(http_response, town_quake_json):
    stream = io.StringIO()
    with mock.patch("connectors.base.requests.get", return_value=http_response(200, town_quake_json)) as get:
        event = asyncio.run(main.main([], presenter=ConsolePresenter(stream)))

    assert event.title == "M 6.6 - 10km NW of Town"
    assert "157 people felt it" in stream.getvalue()
    assert get.call_count == 1


def test_main_url_argument(http_response, collection):
    with mock.patch("connectors.base.requests.get", return_value=http_response(200, collection([]))) as get:
        event = asyncio.run(main.main(["--url", "http://localhost:9/query"], presenter=ConsolePresenter(io.StringIO())))

    assert event is None
    assert get.call_args[0][0] == "http://localhost:9/query"


def test_main_network_failure_presents_nothing():
    stream = io.StringIO()
    with mock.patch("connectors.base.requests.get", side_effect=requests.ConnectionError("offline")):
        event = asyncio.run(main.main([], presenter=ConsolePresenter(stream)))

    assert event is None
    assert stream.getvalue() == ""
