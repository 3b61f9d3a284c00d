"""Tests for settings and the full render pipeline."""

import logging

import pytest
from pydantic import ValidationError

from chatmarkup.config import ChatMarkupSettings, StyleType, load_settings
from chatmarkup.render import render_message


def _settings(**kwargs) -> ChatMarkupSettings:
    return ChatMarkupSettings(**kwargs)


# === Settings ===

class TestSettings:
    def test_defaults(self):
        settings = load_settings()
        assert settings.style == StyleType.WITHOUT_CHARS
        assert settings.highlight_urls is True
        assert settings.escape_html is True
        assert settings.code_color == "#595959"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CHATMARKUP_STYLE", "with_chars")
        monkeypatch.setenv("CHATMARKUP_HIGHLIGHT_URLS", "false")
        monkeypatch.setenv("CHATMARKUP_CODE_COLOR", "#00ff00")
        settings = load_settings()
        assert settings.style == StyleType.WITH_CHARS
        assert settings.highlight_urls is False
        assert settings.code_color == "#00ff00"

    def test_from_env_file(self, tmp_path):
        (tmp_path / ".env").write_text("CHATMARKUP_STYLE=none\n")
        assert load_settings().style == StyleType.NONE

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("CHATMARKUP_STYLE", "with_chars")
        assert load_settings(style=StyleType.NONE).style == StyleType.NONE

    def test_bad_color(self):
        with pytest.raises(ValidationError):
            _settings(code_color="red")

    def test_bad_style(self):
        with pytest.raises(ValidationError):
            _settings(style="fancy")

    def test_warns_when_everything_off(self, caplog):
        with caplog.at_level(logging.WARNING, logger="chatmarkup.config"):
            load_settings(style=StyleType.NONE, highlight_urls=False)
        assert "both disabled" in caplog.text

    def test_no_warning_by_default(self, caplog):
        with caplog.at_level(logging.WARNING, logger="chatmarkup.config"):
            load_settings()
        assert caplog.text == ""


# === Render pipeline ===

class TestRenderMessage:
    def test_markdown_and_url(self):
        result = render_message("*look* at www.example.com", _settings())
        assert result == '<b>look</b> at <a href="www.example.com">www.example.com</a>'

    def test_escapes_user_html(self):
        assert render_message("*hi* <script>", _settings()) == "<b>hi</b> &lt;script&gt;"

    def test_escaped_tags_do_not_block_styling(self):
        assert render_message("*a <b>x*", _settings()) == "<b>a &lt;b&gt;x</b>"

    def test_raw_tags_block_styling_without_escape(self):
        assert render_message("*a <b>x*", _settings(escape_html=False)) == "*a <b>x*"

    def test_quotes_not_escaped(self):
        assert render_message('say "hi"', _settings()) == 'say "hi"'

    def test_style_none(self):
        assert render_message("*x* & y", _settings(style=StyleType.NONE)) == "*x* &amp; y"

    def test_with_chars(self):
        assert render_message("*x*", _settings(style=StyleType.WITH_CHARS)) == "<b>*x*</b>"

    def test_urls_off(self):
        text = "see www.example.com"
        assert render_message(text, _settings(highlight_urls=False)) == text

    def test_code_color(self):
        result = render_message("`x`", _settings(code_color="#abcdef"))
        assert result == "<font color=#abcdef><code>x</code></font>"

    def test_empty(self):
        assert render_message("", _settings()) == ""

    def test_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("CHATMARKUP_STYLE", "none")
        assert render_message("*x*") == "*x*"
