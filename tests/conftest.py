"""
Shared fixtures: a local Telemost API stub served over HTTP.
"""

import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit, parse_qs

import pytest

from telemost_cli.api import TelemostClient
from telemost_cli.config import TelemostConfig


CONFERENCE_ID = "12345678901234"

CREATE_RESPONSE = {
    "id": CONFERENCE_ID,
    "join_url": "https://telemost.yandex.ru/j/12345678901234",
    "live_stream": {
        "watch_url": "https://telemost.yandex.ru/live/123456789abcdef0123456789abcdef0"
    }
}

GET_RESPONSE = {
    "id": CONFERENCE_ID,
    "join_url": "https://telemost.yandex.ru/j/12345678901234",
    "access_level": "ORGANIZATION",
    "waiting_room_level": "ORGANIZATION",
    "live_stream": {
        "watch_url": "https://telemost.yandex.ru/live/123456789abcdef0123456789abcdef0",
        "access_level": "PUBLIC",
        "title": "Example conference created via API",
        "description": "Some description of example conference created via API"
    },
    "sip_uri_meeting": "12345678901234567890@sip.t.ya.ru",
    "sip_uri_telemost": "j@sip.t.ya.ru",
    "sip_id": "12345678901234567890"
}

UPDATE_RESPONSE = {
    "live_stream": {
        "access_level": "PUBLIC",
        "title": "Example conference created via API",
        "description": "Some description of example conference created via API"
    }
}

COHOSTS_RESPONSE = {
    "cohosts": [
        {"email": "user1@yandex.ru"},
        {"email": "user2@org-domain.ru"}
    ]
}

ERROR_RESPONSE = {
    "error": "ConferenceNotFound",
    "description": "Conference not found.",
    "message": "Конференция не найдена."
}

ROUTES = {
    ("POST", "/"): (200, CREATE_RESPONSE),
    ("GET", f"/{CONFERENCE_ID}"): (200, GET_RESPONSE),
    ("PATCH", f"/{CONFERENCE_ID}"): (200, UPDATE_RESPONSE),
    ("DELETE", f"/{CONFERENCE_ID}"): (204, None),
    ("GET", f"/{CONFERENCE_ID}/cohosts"): (200, COHOSTS_RESPONSE),
    ("PATCH", f"/{CONFERENCE_ID}/cohosts"): (204, None),
    ("PUT", f"/{CONFERENCE_ID}/cohosts"): (204, None),
    ("DELETE", f"/{CONFERENCE_ID}/cohosts"): (204, None),
}


class TelemostStubHandler(BaseHTTPRequestHandler):
    """
    Serves canned API responses.

    Special tokens switch the response:
    - http-error: 404 with an error envelope
    - msg-error: 404 with a non-JSON body
    - data-error: 200 with a non-JSON body
    """

    def _write(self, status, body=None, raw=None):
        self.send_response(status)
        payload = raw if raw is not None else (json.dumps(body).encode() if body is not None else b"")
        if payload:
            self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        if payload:
            self.wfile.write(payload)

    def _handle(self):
        parts = urlsplit(self.path)
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length else b""

        self.server.requests.append({
            "method": self.command,
            "path": parts.path,
            "query": parse_qs(parts.query),
            "headers": dict(self.headers),
            "body": json.loads(body) if body else None,
        })

        auth = self.headers.get("Authorization", "")

        if auth == "OAuth http-error":
            return self._write(404, ERROR_RESPONSE)
        if auth == "OAuth msg-error":
            return self._write(404, raw=b"Not found")
        if auth == "OAuth data-error":
            return self._write(200, raw=b"XYZ")

        route = ROUTES.get((self.command, parts.path))
        if route is None:
            return self._write(405, raw=b"Method not allowed")

        status, response = route
        self._write(status, response)

    do_GET = _handle
    do_POST = _handle
    do_PUT = _handle
    do_PATCH = _handle
    do_DELETE = _handle

    def log_message(self, format, *args):
        pass


@pytest.fixture(scope="session")
def api_server():
    """Run the API stub on a free local port."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), TelemostStubHandler)
    server.requests = []
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    yield server

    server.shutdown()
    server.server_close()


@pytest.fixture
def api_url(api_server):
    api_server.requests.clear()
    host, port = api_server.server_address
    return f"http://{host}:{port}"


@pytest.fixture
def make_client(api_url):
    """Factory for clients pointed at the API stub."""
    clients = []

    def factory(token="Test1234"):
        client = TelemostClient(token, config=TelemostConfig(api_url=api_url, timeout=5))
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()
