from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.cors import (
    ALLOW_METHODS,
    DEFAULT_ORIGINS,
    AllowListCORSMiddleware,
    cors_headers,
    parse_origins,
)

MOVIE_ID = "dcdd0fad-a94c-4810-8acc-5f108d3b18c3"


def test_parse_origins():
    assert parse_origins(None) == DEFAULT_ORIGINS
    assert parse_origins("  ") == DEFAULT_ORIGINS
    assert parse_origins("https://a.io, https://b.io,") == ["https://a.io", "https://b.io"]


def test_headers_without_origin():
    assert cors_headers(None, DEFAULT_ORIGINS) == {"Access-Control-Allow-Origin": "*"}


def test_headers_for_accepted_origin():
    assert cors_headers("https://movies.com", DEFAULT_ORIGINS) == {
        "Access-Control-Allow-Origin": "https://movies.com",
        "Vary": "Origin",
    }


def test_headers_for_rejected_origin():
    assert cors_headers("https://evil.example", DEFAULT_ORIGINS) == {}
    assert cors_headers("https://evil.example", DEFAULT_ORIGINS, preflight=True) == {}


def test_preflight_headers():
    headers = cors_headers("http://localhost:8080", DEFAULT_ORIGINS, preflight=True)
    assert headers["Access-Control-Allow-Methods"] == ALLOW_METHODS
    assert headers["Access-Control-Allow-Origin"] == "http://localhost:8080"


# --- middleware ----------------------------------------------------------

def test_accepted_origin_is_echoed(client):
    resp = client.get("/movies", headers={"Origin": "http://127.0.0.1:5500"})
    assert resp.headers["access-control-allow-origin"] == "http://127.0.0.1:5500"
    assert resp.headers["vary"] == "Origin"


def test_no_origin_gets_wildcard(client):
    resp = client.delete(f"/movies/{MOVIE_ID}")
    assert resp.headers["access-control-allow-origin"] == "*"


def test_rejected_origin_still_served_without_headers(client):
    resp = client.get("/movies", headers={"Origin": "https://evil.example"})
    assert resp.status_code == 200
    assert "access-control-allow-origin" not in resp.headers


def test_error_responses_carry_headers(client):
    resp = client.get("/movies/missing", headers={"Origin": "https://movies.com"})
    assert resp.status_code == 404
    assert resp.headers["access-control-allow-origin"] == "https://movies.com"


def test_preflight_for_accepted_origin(client):
    resp = client.options(f"/movies/{MOVIE_ID}", headers={"Origin": "https://movies.com"})
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "https://movies.com"
    assert resp.headers["access-control-allow-methods"] == ALLOW_METHODS


def test_preflight_for_rejected_origin(client):
    resp = client.options(f"/movies/{MOVIE_ID}", headers={"Origin": "https://evil.example"})
    assert resp.status_code == 200
    assert "access-control-allow-methods" not in resp.headers


# --- unhandled errors ----------------------------------------------------

def _broken_app():
    broken = FastAPI()
    broken.add_middleware(AllowListCORSMiddleware, allow_origins=DEFAULT_ORIGINS)

    @broken.get("/boom")
    def boom():
        raise RuntimeError("boom")

    return broken


def test_unhandled_error_is_500_with_cors_headers():
    resp = TestClient(_broken_app()).get("/boom", headers={"Origin": "https://movies.com"})
    assert resp.status_code == 500
    assert resp.json() == {"message": "Internal Server Error"}
    assert resp.headers["access-control-allow-origin"] == "https://movies.com"
