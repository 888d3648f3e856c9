"""Tests for message composition."""

import pytest

from sendsms.domain.interfaces import IURLShortener, ShorteningError
from sendsms.services.composer import MessageComposer, compose_body


class FakeShortener(IURLShortener):
    def __init__(self, short_url="http://x.co/abc", error=None):
        self.short_url = short_url
        self.error = error
        self.calls = []

    def shorten(self, long_url):
        self.calls.append(long_url)
        if self.error:
            raise self.error
        return self.short_url


def test_empty_body_and_url():
    assert compose_body("", "") == ""


def test_body_at_limit_is_unchanged():
    body = "a" * 160
    assert compose_body(body, "") == body


def test_body_over_limit_is_truncated():
    result = compose_body("a" * 161, "")
    assert result == "a" * 157 + "..."
    assert len(result) == 160


def test_short_body_with_url_is_unchanged():
    body = "a" * 100
    result = compose_body(body, "http://x.co/abc")
    assert result == body + "\nhttp://x.co/abc"
    assert len(result) == 116


@pytest.mark.parametrize("body_len", [0, 1, 50, 144])
def test_fitting_body_and_url_are_kept_verbatim(body_len):
    url = "http://x.co/abc"
    body = "b" * body_len
    assert compose_body(body, url) == body + "\n" + url


@pytest.mark.parametrize("body_len", [145, 146, 200, 1000])
def test_long_body_keeps_whole_url(body_len):
    url = "http://x.co/abc"
    suffix = "\n" + url
    body = "b" * body_len
    result = compose_body(body, url)
    assert len(result) == 160
    assert result == body[:157 - len(suffix)] + "..." + suffix
    assert result.endswith("...\nhttp://x.co/abc")


def test_body_plus_url_exactly_at_limit():
    url = "http://x.co/abc"
    body = "c" * (160 - len(url) - 1)
    assert compose_body(body, url) == body + "\n" + url


def test_oversized_url_drops_body_without_error():
    url = "http://example.com/" + "x" * 200
    result = compose_body("some text", url)
    assert result == "...\n" + url


def test_truncation_counts_code_points():
    body = "é" * 161
    result = compose_body(body, "")
    assert result == "é" * 157 + "..."
    assert len(result) == 160


def test_composer_without_url_does_not_shorten():
    shortener = FakeShortener()
    composer = MessageComposer(shortener=shortener)
    assert composer.compose("hello") == "hello"
    assert shortener.calls == []


def test_composer_appends_shortened_url():
    shortener = FakeShortener(short_url="http://x.co/abc")
    composer = MessageComposer(shortener=shortener)
    result = composer.compose("hello", "https://example.com/a/very/long/path")
    assert result == "hello\nhttp://x.co/abc"
    assert shortener.calls == ["https://example.com/a/very/long/path"]


def test_composer_propagates_shortening_error():
    composer = MessageComposer(shortener=FakeShortener(error=ShorteningError("down")))
    with pytest.raises(ShorteningError):
        composer.compose("hello", "https://example.com")


def test_composer_requires_shortener_for_url():
    with pytest.raises(ValueError):
        MessageComposer().compose("hello", "https://example.com")
