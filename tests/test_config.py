"""Tests for environment configuration and label sets."""

from __future__ import annotations

import logging

import pytest

from cvflow.config import get_locale, get_log_level, load_layout_config
from cvflow.constants.labels import ENGLISH, FRENCH, get_labels, list_labels
from cvflow.constants.layout import LayoutConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "CVFLOW_LOCALE",
        "CVFLOW_MARGIN",
        "CVFLOW_BASE_FONT_SIZE",
        "CVFLOW_LINE_HEIGHT",
        "CVFLOW_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestLayoutConfig:
    def test_defaults(self) -> None:
        config = LayoutConfig()

        assert config.content_width == 182.0
        assert config.right_edge == 196.0

    def test_letter_preset(self) -> None:
        config = LayoutConfig.letter()

        assert config.margin == 20.0
        assert config.paragraph_gap == 3.0
        assert config.content_width == 170.0


class TestLoadLayoutConfig:
    def test_without_overrides_returns_base(self) -> None:
        base = LayoutConfig.letter()

        assert load_layout_config(base) is base

    def test_applies_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CVFLOW_MARGIN", "18")
        monkeypatch.setenv("CVFLOW_LINE_HEIGHT", "5.0")

        config = load_layout_config()

        assert config.margin == 18.0
        assert config.line_height == 5.0
        assert config.base_font_size == 10.0

    @pytest.mark.parametrize("raw", ["abc", "0", "-3"])
    def test_ignores_invalid_values(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture, raw: str
    ) -> None:
        monkeypatch.setenv("CVFLOW_BASE_FONT_SIZE", raw)

        with caplog.at_level(logging.WARNING):
            config = load_layout_config()

        assert config.base_font_size == 10.0
        assert "CVFLOW_BASE_FONT_SIZE" in caplog.text


class TestLocale:
    def test_defaults_to_french(self) -> None:
        assert get_locale() is FRENCH

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CVFLOW_LOCALE", "EN")

        assert get_locale() is ENGLISH

    def test_unknown_env_locale_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CVFLOW_LOCALE", "de")

        assert get_locale() is FRENCH

    def test_get_labels_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown locale 'xx'"):
            get_labels("xx")

    def test_list_labels(self) -> None:
        assert list_labels() == ["en", "fr"]

    def test_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        assert get_log_level() == "WARNING"
        monkeypatch.setenv("CVFLOW_LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"
