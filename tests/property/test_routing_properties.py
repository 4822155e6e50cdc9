"""Property tests for request dispatch.

Every routed (method, path) pair answers with its handler's envelope;
every other pair answers 404 with the exact requested path, and all
responses carry the fixed CORS headers.
"""

from __future__ import annotations

from fastapi.testclient import TestClient
from hypothesis import given, settings
from hypothesis import strategies as st

from btl_api.config.settings import ApiSettings
from btl_api.main import create_app
from btl_api.middleware.cors import CORS_HEADERS

_client = TestClient(
    create_app(ApiSettings(version="3.1.4")), raise_server_exceptions=False
)


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

_ROUTED_PATHS = {"/", "/api", "/health", "/api/health"}

path_segments = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyz0123456789-_~", min_size=1, max_size=12
)
unrouted_paths = (
    st.lists(path_segments, min_size=1, max_size=4)
    .map(lambda parts: "/" + "/".join(parts))
    .filter(lambda p: p not in _ROUTED_PATHS)
)
routed_paths = st.sampled_from(sorted(_ROUTED_PATHS))
non_get_methods = st.sampled_from(
    ["POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "PROPFIND", "MKCOL"]
)
all_methods = st.one_of(st.just("GET"), non_get_methods)


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


@settings(max_examples=100)
@given(method=all_methods, path=unrouted_paths)
def test_unrouted_paths_return_not_found_envelope(method: str, path: str) -> None:
    resp = _client.request(method, path)

    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": f"Not found: {path}"}


@settings(max_examples=50)
@given(method=non_get_methods, path=routed_paths)
def test_routed_paths_only_answer_get(method: str, path: str) -> None:
    resp = _client.request(method, path)

    assert resp.status_code == 404
    assert resp.json() == {"success": False, "error": f"Not found: {path}"}


@settings(max_examples=20)
@given(path=routed_paths)
def test_routed_paths_succeed_with_configured_version(path: str) -> None:
    resp = _client.get(path)
    body = resp.json()

    assert resp.status_code == 200
    assert body["success"] is True
    assert body["data"]["version"] == "3.1.4"
    assert "error" not in body


@settings(max_examples=100)
@given(method=all_methods, path=st.one_of(routed_paths, unrouted_paths))
def test_every_response_has_fixed_headers(method: str, path: str) -> None:
    resp = _client.request(method, path)

    assert resp.headers["content-type"] == "application/json"
    for name, value in CORS_HEADERS.items():
        assert resp.headers[name] == value
