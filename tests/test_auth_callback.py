from urllib.parse import parse_qs, urlparse


def test_code_redirects_to_dashboard(client, backend):
    response = client.get("/auth/callback?code=abc", follow_redirects=False)

    assert response.status_code == 307
    location = urlparse(response.headers["location"])
    assert location.path == "/dashboard"
    assert parse_qs(location.query) == {"emailConfirmed": ["true"]}
    assert backend.exchanged_codes == [("abc", None)]


def test_session_cookies_are_set(client, backend):
    response = client.get("/auth/callback?code=abc", follow_redirects=False)

    assert response.cookies.get("sb-access-token") == "access-123"
    assert response.cookies.get("sb-refresh-token") == "refresh-456"


def test_code_verifier_cookie_is_forwarded(client, backend):
    client.cookies.set("sb-code-verifier", "verifier-789")

    client.get("/auth/callback?code=abc", follow_redirects=False)

    assert backend.exchanged_codes == [("abc", "verifier-789")]


def test_failed_exchange_still_redirects_to_dashboard(client, backend):
    backend.exchange_error = RuntimeError("invalid flow state")

    response = client.get("/auth/callback?code=abc", follow_redirects=False)

    assert response.status_code == 307
    assert "emailConfirmed=true" in response.headers["location"]
    assert "sb-access-token" not in response.cookies


def test_missing_code_redirects_to_login(client, backend):
    response = client.get("/auth/callback", follow_redirects=False)

    assert response.status_code == 307
    location = urlparse(response.headers["location"])
    assert location.path == "/login"
    assert parse_qs(location.query) == {"error": ["callback_error"]}
    assert backend.exchanged_codes == []
