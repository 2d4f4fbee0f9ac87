"""Tests de resolve_port et de la préparation du serveur uvicorn."""

import logging
import math

import pytest

from app.main import DEFAULT_PORT, build_server, create_app, resolve_port


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (3001, 3001),
        ("8080", 8080),
        (" 8080 ", 8080),
        ("8080abc", 8080),
        (8081.9, 8081),
        ("abc", DEFAULT_PORT),
        ("", DEFAULT_PORT),
        (None, DEFAULT_PORT),
        (True, DEFAULT_PORT),
        (math.nan, DEFAULT_PORT),
        (math.inf, DEFAULT_PORT),
        ([8080], DEFAULT_PORT),
    ],
)
def test_resolve_port(value, expected):
    assert resolve_port(value) == expected


def test_default_port():
    assert DEFAULT_PORT == 3000


def test_build_server(test_settings, caplog):
    app = create_app(test_settings)

    with caplog.at_level(logging.INFO, logger="app.main"):
        server, port = build_server(app, "8080", settings=test_settings)

    assert port == 8080
    assert server.config.port == 8080
    assert server.config.host == test_settings.HOST
    records = [r for r in caplog.records if r.getMessage() == "Server is running"]
    assert len(records) == 1
    assert records[0].event == "server.start"
    assert records[0].port == 8080


def test_build_server_invalid_port_falls_back(test_settings):
    _, port = build_server(create_app(test_settings), "abc", settings=test_settings)
    assert port == DEFAULT_PORT
