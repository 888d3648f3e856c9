"""Tests for the template URL shortener adapter."""

from unittest.mock import patch

import pytest
import requests

from sendsms.adapters.shortener_adapter import TemplateShortenerAdapter
from sendsms.domain.interfaces import ShorteningError

TEMPLATE = "https://short.example/create?format=simple&url=%s"


def test_template_without_placeholder_is_rejected():
    with pytest.raises(ValueError):
        TemplateShortenerAdapter("https://short.example/create")


def test_build_url_substitutes_long_url():
    adapter = TemplateShortenerAdapter(TEMPLATE)
    assert adapter.build_url("https://example.com/x") == (
        "https://short.example/create?format=simple&url=https://example.com/x"
    )


def test_shorten_returns_trimmed_body(response_factory):
    adapter = TemplateShortenerAdapter(TEMPLATE)
    with patch("sendsms.adapters.shortener_adapter.requests.get") as mock_get:
        mock_get.return_value = response_factory(200, "  http://x.co/abc\n")
        short = adapter.shorten("https://example.com/x")

    assert short == "http://x.co/abc"
    mock_get.assert_called_once_with(
        "https://short.example/create?format=simple&url=https://example.com/x",
        timeout=None,
    )


def test_shorten_passes_timeout(response_factory):
    adapter = TemplateShortenerAdapter(TEMPLATE, timeout=5.0)
    with patch("sendsms.adapters.shortener_adapter.requests.get") as mock_get:
        mock_get.return_value = response_factory(200, "http://x.co/abc")
        adapter.shorten("https://example.com/x")

    assert mock_get.call_args.kwargs["timeout"] == 5.0


@pytest.mark.parametrize("body", ["", "   ", "\n\t\n"])
def test_empty_body_is_an_error(response_factory, body):
    adapter = TemplateShortenerAdapter(TEMPLATE)
    with patch("sendsms.adapters.shortener_adapter.requests.get") as mock_get:
        mock_get.return_value = response_factory(200, body)
        with pytest.raises(ShorteningError, match="empty"):
            adapter.shorten("https://example.com/x")


def test_transport_failure_is_an_error():
    adapter = TemplateShortenerAdapter(TEMPLATE)
    with patch("sendsms.adapters.shortener_adapter.requests.get") as mock_get:
        mock_get.side_effect = requests.ConnectionError("connection refused")
        with pytest.raises(ShorteningError, match="connection refused"):
            adapter.shorten("https://example.com/x")
