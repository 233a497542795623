"""Tests for Host header authorization."""

import pytest

from greeter_service.middleware.hosts import is_permitted_host, split_host_header


def test_development_accepts_any_host(client):
    res = client.get("/", headers={"Host": "attacker.example"})
    assert res.status_code == 200
    assert res.get_data(as_text=True) == "Hello World!"


def test_production_accepts_listed_host(production_client):
    res = production_client.get("/", headers={"Host": "greeter.example.com"})
    assert res.status_code == 200


def test_production_accepts_listed_host_with_port(production_client):
    res = production_client.get("/", headers={"Host": "greeter.example.com:3000"})
    assert res.status_code == 200


def test_production_accepts_subdomain_entry(production_client):
    res = production_client.get("/", headers={"Host": "api.internal"})
    assert res.status_code == 200


def test_production_accepts_ip_literal(production_client):
    res = production_client.get("/", headers={"Host": "10.0.0.5:3000"})
    assert res.status_code == 200


def test_production_rejects_unlisted_host(production_client):
    res = production_client.get("/", headers={"Host": "attacker.example"})
    assert res.status_code == 403
    assert res.mimetype == "text/plain"
    assert res.get_data(as_text=True) == "Host not permitted"


def test_production_rejects_before_routing(production_client):
    res = production_client.get("/missing", headers={"Host": "attacker.example"})
    assert res.status_code == 403


@pytest.mark.parametrize(
    "header, expected",
    [
        ("localhost", True),
        ("LOCALHOST:3000", True),
        ("app.localhost", True),
        ("site.test", True),
        ("127.0.0.1:8080", True),
        ("[::1]:3000", True),
        ("example.com", False),
        ("notlocalhost", False),
        ("", False),
        ("[::1", False),
        ("[::1]evil.com", False),
        ("[::1]:80x", False),
        ("[127.0.0.1]", False),
        ("localhost:1:2", False),
        ("localhost:http", False),
        ("::1", False),
    ],
)
def test_is_permitted_host_defaults(header, expected):
    assert is_permitted_host(header, ("localhost", ".localhost", ".test")) is expected


@pytest.mark.parametrize(
    "header, expected",
    [
        ("example.com:80", "example.com"),
        ("example.com", "example.com"),
        ("example.com:", "example.com"),
        ("[2001:db8::1]:443", "2001:db8::1"),
        ("  spaced.test  ", "spaced.test"),
        ("[::1]evil.com", None),
        ("localhost:1:2", None),
        ("[not-an-ip]", None),
        ("", None),
    ],
)
def test_split_host_header(header, expected):
    assert split_host_header(header) == expected
