# tests/test_utils_log.py
"""Tests for utils/log.py: topic filtering via STEMMER_DEBUG_TOPICS."""

from __future__ import annotations

import io

import pytest

from english_stemmer.utils import log as LOG


@pytest.fixture(autouse=True)
def _reset_topics(monkeypatch):
    """Reset debug topics between tests."""
    monkeypatch.delenv("STEMMER_DEBUG_TOPICS", raising=False)
    LOG.reload_topics()
    yield
    monkeypatch.delenv("STEMMER_DEBUG_TOPICS", raising=False)
    LOG.reload_topics()


def test_log_debug_respects_topics_env(monkeypatch, capsys):
    monkeypatch.setenv("STEMMER_DEBUG_TOPICS", "accuracy")
    LOG.reload_topics()

    LOG.debug("hello on accuracy", topic="accuracy")
    LOG.debug("should be silent", topic="other")

    captured = capsys.readouterr()
    assert "hello on accuracy" in captured.err
    assert "[accuracy][DEBUG]" in captured.err
    assert "should be silent" not in captured.err


def test_log_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv("STEMMER_DEBUG_TOPICS", "all")
    LOG.reload_topics()

    LOG.debug("m1", topic="foo")
    LOG.debug("m2", topic="bar", level="info")

    captured = capsys.readouterr()
    assert "m1" in captured.err and "m2" in captured.err
    assert "[bar][INFO]" in captured.err


def test_log_debug_silent_without_topics(capsys):
    LOG.debug("nobody listens", topic="stemming")
    assert capsys.readouterr().err == ""
    assert LOG.topic_enabled("stemming") is False


def test_log_debug_writes_to_given_stream(monkeypatch):
    monkeypatch.setenv("STEMMER_DEBUG_TOPICS", " Stemming , accuracy ")
    LOG.reload_topics()

    buf = io.StringIO()
    LOG.debug("to buffer", topic="STEMMING", stream=buf)
    assert "[stemming][DEBUG] to buffer" in buf.getvalue()
