import threading
import time

import pytest
import requests

from fakes import FakeClock, FakeSession, make_response, token_response
from weathertunes.core import (
    CredentialsMissingError,
    UpstreamAuthError,
    UpstreamError,
    UpstreamUnavailableError,
)
from weathertunes.spotify import SpotifyTokenCache


def _cache(session: FakeSession, clock: FakeClock, **kwargs) -> SpotifyTokenCache:
    params = dict(
        client_id="client-id",
        client_secret="client-secret",
        token_url="https://accounts.test/api/token",
        session=session,
        clock=clock,
        safety_margin_s=60,
        timeout=10,
    )
    params.update(kwargs)
    return SpotifyTokenCache(**params)


def test_token_is_cached_within_lifetime() -> None:
    session = FakeSession([token_response("token-1", expires_in=3600)])
    clock = FakeClock()
    cache = _cache(session, clock)

    assert cache.get_token() == "token-1"
    clock.advance(1000)
    assert cache.get_token() == "token-1"

    assert len(session.calls) == 1
    call = session.calls[0]
    assert call["data"] == {"grant_type": "client_credentials"}
    assert call["auth"] == ("client-id", "client-secret")
    assert call["timeout"] == 10


def test_expiry_includes_safety_margin() -> None:
    clock = FakeClock(now=1000.0)
    cache = _cache(FakeSession([token_response(expires_in=3600)]), clock)

    cache.get_token()

    assert cache.state.expires_at_ms == (1000 + 3600 - 60) * 1000


def test_token_refreshed_once_after_expiry() -> None:
    session = FakeSession(
        [token_response("token-1", expires_in=3600), token_response("token-2")]
    )
    clock = FakeClock()
    cache = _cache(session, clock)

    assert cache.get_token() == "token-1"

    # Refreshes before the real expiry, inside the safety margin
    clock.advance(3600 - 30)
    assert cache.get_token() == "token-2"
    assert cache.get_token() == "token-2"

    assert len(session.calls) == 2


def test_invalidate_forces_fresh_exchange() -> None:
    session = FakeSession([token_response("token-1"), token_response("token-2")])
    cache = _cache(session, FakeClock())

    assert cache.get_token() == "token-1"
    cache.invalidate()

    assert cache.state is None
    assert cache.get_token() == "token-2"
    assert len(session.calls) == 2


@pytest.mark.parametrize("status", [400, 401, 403])
def test_rejected_credentials_raise_auth_error(status: int) -> None:
    session = FakeSession([make_response(status, {"error": "invalid_client"})])
    cache = _cache(session, FakeClock())

    with pytest.raises(UpstreamAuthError):
        cache.get_token()

    assert cache.state is None


def test_network_failure_raises_unavailable() -> None:
    cache = _cache(FakeSession([requests.ConnectionError("offline")]), FakeClock())

    with pytest.raises(UpstreamUnavailableError):
        cache.get_token()


def test_server_error_and_bad_payload_raise_upstream_error() -> None:
    with pytest.raises(UpstreamError):
        _cache(FakeSession([make_response(502, {})]), FakeClock()).get_token()

    with pytest.raises(UpstreamError):
        _cache(FakeSession([make_response(200, {"nope": 1})]), FakeClock()).get_token()


def test_missing_credentials_skip_network() -> None:
    session = FakeSession()
    cache = _cache(session, FakeClock(), client_id="", client_secret="")

    assert cache.has_credentials is False
    with pytest.raises(CredentialsMissingError):
        cache.get_token()
    assert session.calls == []


def test_concurrent_cache_misses_share_one_exchange() -> None:
    def slow_token(**kwargs):
        time.sleep(0.05)
        return token_response("shared-token")

    session = FakeSession([slow_token])
    cache = _cache(session, FakeClock())

    results = []
    barrier = threading.Barrier(8)

    def worker() -> None:
        barrier.wait()
        results.append(cache.get_token())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == ["shared-token"] * 8
    assert len(session.calls) == 1
