"""Tests for the request executor."""

import json
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest
import requests

from coinmarketcap.errors import DecodeError, TransportError
from coinmarketcap.executor import RawResponse, RequestExecutor, ResponseOrigin
from coinmarketcap.models import ApiResponseMap, Cryptocurrency
from tests.helpers import make_response


BASE_URL = "https://api.example.com/v1/"


def identity(payload):
    return payload


@pytest.fixture
def cookie_server():
    """Local HTTP server that sets a cookie on every response and records
    the Cookie header of each request it receives."""
    received = []

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):
            received.append(self.headers.get("Cookie"))
            body = b'{"status": {"error_code": 0}}'
            self.send_response(200)
            self.send_header("Set-Cookie", "__cf_bm=abc; Path=/")
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format, *args):
            pass

    server = HTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_port}/", received
    server.shutdown()
    server.server_close()


class TestRequestExecutor:
    """Test suite for RequestExecutor."""

    @pytest.fixture
    def executor(self, mock_session):
        """Create a RequestExecutor backed by a mock session."""
        return RequestExecutor(base_url=BASE_URL, api_key="test_key", session=mock_session)

    def test_executor_initialization(self, executor, mock_session):
        """Test that the API key and Accept headers are set once on the session."""
        assert executor.base_url == BASE_URL
        assert executor.timeout == 30
        assert mock_session.headers["X-CMC_PRO_API_KEY"] == "test_key"
        assert mock_session.headers["Accept"] == "application/json"

    def test_executor_default_session(self):
        """Test that a real requests session is created when none is given."""
        executor = RequestExecutor(base_url=BASE_URL, api_key="test_key")

        assert isinstance(executor.session, requests.Session)
        assert executor.session.headers["X-CMC_PRO_API_KEY"] == "test_key"
        executor.close()

    def test_fetch_builds_encoded_url(self, executor, mock_session):
        """Test that fetch issues one GET to the encoded URL with the timeout."""
        mock_session.get.return_value = make_response({"ok": True})

        executor.fetch("x/y", {"id": "1,2", "convert": "", "aux": None})

        mock_session.get.assert_called_once_with("https://api.example.com/v1/x/y?id=1%2C2", timeout=30)

    def test_fetch_success_origin(self, executor, mock_session):
        mock_session.get.return_value = make_response('{"a": 1}', status_code=200)

        raw = executor.fetch("x", {})

        assert raw == RawResponse(ResponseOrigin.SUCCESS, '{"a": 1}', 200)

    def test_fetch_error_body_origin(self, executor, mock_session):
        """Test that a non-2xx body is captured instead of raised."""
        mock_session.get.return_value = make_response('{"status": {}}', status_code=401)

        raw = executor.fetch("x", {})

        assert raw.origin == ResponseOrigin.ERROR_BODY
        assert raw.text == '{"status": {}}'
        assert raw.status_code == 401

    @pytest.mark.parametrize("body", ["", "   ", "\n\t", None])
    @pytest.mark.parametrize("status_code", [200, 204, 400, 500])
    def test_execute_blank_body_returns_none(self, executor, mock_session, body, status_code):
        """Test that a blank body yields None whatever the status."""
        mock_session.get.return_value = make_response(body, status_code=status_code)

        assert executor.execute("x", {}, ApiResponseMap.decoder(Cryptocurrency)) is None
        assert executor.execute("x", {}, identity) is None

    @pytest.mark.parametrize("status_code", [200, 400, 401, 429, 500])
    def test_execute_json_body_matches_independent_parse(self, executor, mock_session, status_code):
        """Test that decoding is the same for success and error bodies."""
        body = '{"status": {"error_code": 0}, "data": [1, 2, {"x": null}]}'
        mock_session.get.return_value = make_response(body, status_code=status_code)

        result = executor.execute("x", {}, identity)

        assert result == json.loads(body)

    def test_execute_api_error_payload_decodes(self, executor, mock_session):
        """Test that an API-level error decodes into the envelope, not an exception."""
        mock_session.get.return_value = make_response({
            "status": {
                "timestamp": "2024-05-01T12:00:00.000Z",
                "error_code": 1002,
                "error_message": "API key missing.",
                "elapsed": 0,
                "credit_count": 0,
            }
        }, status_code=401)

        result = executor.execute("x", {}, ApiResponseMap.decoder(Cryptocurrency))

        assert result.is_error
        assert result.status.error_code == 1002
        assert result.status.error_message == "API key missing."
        assert result.data is None

    @pytest.mark.parametrize("status_code", [200, 502])
    def test_execute_malformed_json_raises_decode_error(self, executor, mock_session, status_code):
        """Test that a non-JSON body raises DecodeError."""
        mock_session.get.return_value = make_response("<html>Bad Gateway</html>", status_code=status_code)

        with pytest.raises(DecodeError) as exc_info:
            executor.execute("x", {}, identity)

        assert exc_info.value.status_code == status_code
        assert exc_info.value.text == "<html>Bad Gateway</html>"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_execute_wrong_shape_raises_decode_error(self, executor, mock_session):
        """Test that JSON of the wrong shape for the envelope raises DecodeError."""
        mock_session.get.return_value = make_response([1, 2, 3])

        with pytest.raises(DecodeError):
            executor.execute("x", {}, ApiResponseMap.decoder(Cryptocurrency))

    @pytest.mark.parametrize("error", [
        requests.exceptions.ConnectionError("Connection refused"),
        requests.exceptions.Timeout("Read timed out"),
        requests.exceptions.SSLError("certificate verify failed"),
        requests.exceptions.ChunkedEncodingError("Connection broken"),
    ])
    def test_execute_transport_error_propagates_unchanged(self, executor, mock_session, error):
        """Test that transport failures are re-raised as the same object."""
        mock_session.get.side_effect = error

        with pytest.raises(TransportError) as exc_info:
            executor.execute("x", {}, identity)

        assert exc_info.value is error

    def test_execute_refused_connection(self):
        """Test a real refused connection surfaces as a transport error, not a decode error."""
        executor = RequestExecutor(base_url="http://127.0.0.1:1/", api_key="test_key", timeout=5)

        with pytest.raises(requests.exceptions.ConnectionError):
            executor.execute("cryptocurrency/map", {}, identity)
        executor.close()

    def test_execute_one_request_per_call(self, executor, mock_session):
        """Test that nothing is retried, even on server errors."""
        mock_session.get.return_value = make_response({"status": {"error_code": 500}}, status_code=500)

        executor.execute("x", {}, identity)

        assert mock_session.get.call_count == 1

    def test_execute_leaves_session_unchanged(self, executor, mock_session):
        """Test that consecutive calls issue independent requests and keep the session as built."""
        headers_before = dict(mock_session.headers)
        mock_session.get.return_value = make_response({"status": {"error_code": 0}})

        executor.execute("a", {"id": "1"}, identity)
        executor.execute("b", {"symbol": "BTC"}, identity)

        assert mock_session.headers == headers_before
        assert [c.args[0] for c in mock_session.get.call_args_list] == [
            BASE_URL + "a?id=1",
            BASE_URL + "b?symbol=BTC",
        ]
        assert all(c.kwargs == {"timeout": 30} for c in mock_session.get.call_args_list)


class TestRequestExecutorCookies:
    """Test that no cookie state carries over between calls."""

    def test_cookie_from_first_response_not_sent_on_second(self, cookie_server):
        base_url, received = cookie_server
        executor = RequestExecutor(base_url=base_url, api_key="test_key", timeout=5)

        first = executor.execute("cryptocurrency/map", {}, identity)
        second = executor.execute("cryptocurrency/map", {}, identity)
        executor.close()

        assert first == second == {"status": {"error_code": 0}}
        assert received == [None, None]
        assert len(executor.session.cookies) == 0

    def test_supplied_session_stops_storing_cookies(self, cookie_server):
        base_url, received = cookie_server
        session = requests.Session()
        executor = RequestExecutor(base_url=base_url, api_key="test_key", timeout=5, session=session)

        executor.execute("x", {}, identity)
        executor.execute("x", {}, identity)
        session.close()

        assert received == [None, None]
        assert len(session.cookies) == 0
