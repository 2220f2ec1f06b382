#!/usr/bin/env python
"""
Tests para RequestsExecutor.

Se usa una sesión real de requests con ``send`` mockeado: la preparación de
la petición es la de requests, pero nunca se toca la red.
"""

import logging
from unittest.mock import patch

import pytest
import requests

from osmgeocode.exceptions import (
    RequestConstructionError,
    TransportConnectionError,
    TransportError,
    TransportTimeoutError,
)
from osmgeocode.executor import ExecutorResponse, RequestsExecutor

URL = "https://nominatim.openstreetmap.org/search?q=Stockholm&format=json&addressdetails=1"


def make_response(status_code=200, content=b"[]", url=URL):
    response = requests.Response()
    response.status_code = status_code
    response._content = content
    response.url = url
    return response


@pytest.fixture
def session():
    s = requests.Session()
    yield s
    s.close()


class TestExecute:

    def test_returns_body_and_status(self, session):
        executor = RequestsExecutor(session=session)

        with patch.object(session, "send", return_value=make_response(200, b'[{"lat": "1"}]')):
            result = executor.execute("GET", URL)

        assert result == ExecutorResponse(body=b'[{"lat": "1"}]', status_code=200)

    @pytest.mark.parametrize("status_code", [404, 500, 503])
    def test_error_status_is_returned_not_raised(self, session, status_code):
        executor = RequestsExecutor(session=session)

        with patch.object(session, "send", return_value=make_response(status_code, b"Service Unavailable")):
            result = executor.execute("GET", URL)

        assert result.status_code == status_code
        assert result.body == b"Service Unavailable"

    def test_no_auth_header_by_default(self, session):
        executor = RequestsExecutor(session=session)

        with patch.object(session, "send", return_value=make_response()) as mock_send:
            executor.execute("GET", URL)

        prepared = mock_send.call_args.args[0]
        assert prepared.method == "GET"
        assert prepared.url == URL
        assert "Authorization" not in prepared.headers

    def test_basic_auth(self, session):
        executor = RequestsExecutor(session=session)

        with patch.object(session, "send", return_value=make_response()) as mock_send:
            executor.execute("GET", URL, basic_auth=("user", "pass"))

        prepared = mock_send.call_args.args[0]
        assert prepared.headers["Authorization"] == "Basic dXNlcjpwYXNz"

    def test_timeout_and_headers_are_applied(self, session):
        executor = RequestsExecutor(session=session, timeout=7, headers={"User-Agent": "osmgeocode-tests/1.0"})

        with patch.object(session, "send", return_value=make_response()) as mock_send:
            executor.execute("GET", URL)

        assert mock_send.call_args.kwargs["timeout"] == 7
        assert mock_send.call_args.args[0].headers["User-Agent"] == "osmgeocode-tests/1.0"

    def test_default_has_no_timeout(self, session):
        executor = RequestsExecutor(session=session)

        with patch.object(session, "send", return_value=make_response()) as mock_send:
            executor.execute("GET", URL)

        assert mock_send.call_args.kwargs["timeout"] is None

    def test_debug_logging(self, session, caplog):
        caplog.set_level(logging.DEBUG, logger="osmgeocode.executor")
        executor = RequestsExecutor(session=session)

        with patch.object(session, "send", return_value=make_response(200, b"[]")):
            executor.execute("GET", URL)

        assert any("-> 200" in record.getMessage() for record in caplog.records)


class TestErrorMapping:

    @pytest.mark.parametrize("raised, expected", [
        (requests.exceptions.ReadTimeout("read timed out"), TransportTimeoutError),
        (requests.exceptions.ConnectTimeout("connect timed out"), TransportTimeoutError),
        (requests.exceptions.ConnectionError("Name or service not known"), TransportConnectionError),
        (requests.exceptions.TooManyRedirects("Exceeded 30 redirects"), TransportError),
        (requests.exceptions.ChunkedEncodingError("Connection broken"), TransportError),
    ])
    def test_requests_exceptions_are_mapped(self, session, raised, expected):
        executor = RequestsExecutor(session=session, timeout=3)

        with patch.object(session, "send", side_effect=raised):
            with pytest.raises(expected) as exc_info:
                executor.execute("GET", URL)

        assert type(exc_info.value) is expected
        assert exc_info.value.__cause__ is raised
        assert exc_info.value.url == URL

    @pytest.mark.parametrize("url", ["nominatim.openstreetmap.org/search?q=x", "http://"])
    def test_invalid_url_is_construction_error(self, session, url):
        executor = RequestsExecutor(session=session)

        with patch.object(session, "send") as mock_send:
            with pytest.raises(RequestConstructionError):
                executor.execute("GET", url)

        mock_send.assert_not_called()


class TestLifecycle:

    def test_owns_session_by_default(self):
        executor = RequestsExecutor()

        with patch.object(executor.session, "close") as mock_close:
            executor.close()

        mock_close.assert_called_once()

    def test_external_session_is_not_closed(self, session):
        with patch.object(session, "close") as mock_close:
            with RequestsExecutor(session=session) as executor:
                assert executor.session is session

        mock_close.assert_not_called()

    def test_repeated_construction_keeps_handlers(self):
        """Crear ejecutores no acumula manejadores en el logger del módulo."""
        logger = logging.getLogger("osmgeocode.executor")
        before = list(logger.handlers)

        for _ in range(50):
            RequestsExecutor().close()

        assert logger.handlers == before
        assert sum(isinstance(h, logging.NullHandler) for h in logger.handlers) == 1

    def test_custom_logger_is_used(self, session):
        custom = logging.getLogger("osmgeocode.tests.custom")
        executor = RequestsExecutor(session=session, logger=custom)

        assert executor.log is custom

    def test_execute_keeps_no_per_request_state(self, session):
        executor = RequestsExecutor(session=session)
        state_before = dict(vars(executor))

        with patch.object(session, "send", return_value=make_response()):
            executor.execute("GET", URL)

        assert vars(executor) == state_before
