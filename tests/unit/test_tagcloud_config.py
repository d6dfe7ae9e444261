# -*- coding: utf-8 -*-

"""
設定管理のユニットテスト
"""

import pytest

from config.base import AppConfig, LoggingConfig, OutputConfig, get_config, reload_config
from src.error_handling import ConfigurationError
from src.tagcloud.config import (
    TagCloudConfig,
    get_tagcloud_config,
    load_tagcloud_config,
    validate_config,
)
from src.tagcloud.separators import DEFAULT_SEPARATORS


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("TAGCLOUD_SEPARATORS", "TAGCLOUD_CLAMP_FONT", "TAGCLOUD_DEFAULT_WORD_COUNT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestTagCloudConfig:
    """TagCloudConfig のテスト"""

    def test_defaults(self):
        config = TagCloudConfig()
        assert config.separators == DEFAULT_SEPARATORS
        assert config.min_font == 11
        assert config.max_font == 48
        assert config.font_span == 38
        assert config.clamp_font is True
        assert config.default_word_count == 100

    def test_load_without_env(self, clean_env):
        assert load_tagcloud_config() == TagCloudConfig()

    def test_load_with_env(self, clean_env):
        clean_env.setenv("TAGCLOUD_SEPARATORS", " .")
        clean_env.setenv("TAGCLOUD_CLAMP_FONT", "false")
        clean_env.setenv("TAGCLOUD_DEFAULT_WORD_COUNT", "25")

        config = load_tagcloud_config()

        assert config.separators == " ."
        assert config.clamp_font is False
        assert config.default_word_count == 25

    def test_empty_separators_from_env(self, clean_env):
        clean_env.setenv("TAGCLOUD_SEPARATORS", "")
        assert load_tagcloud_config().separators == ""

    def test_invalid_word_count_env(self, clean_env):
        clean_env.setenv("TAGCLOUD_DEFAULT_WORD_COUNT", "many")
        with pytest.raises(ConfigurationError):
            load_tagcloud_config()

    def test_singleton(self, clean_env):
        assert get_tagcloud_config() is get_tagcloud_config()

    def test_validate_default(self):
        assert validate_config(TagCloudConfig()) == []

    def test_validate_errors(self):
        config = TagCloudConfig(min_font=50, max_font=48, font_span=-1, default_word_count=-3)
        assert len(validate_config(config)) == 3


class TestAppConfig:
    """アプリケーション設定のテスト"""

    def test_logging_defaults(self):
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.format == "text"
        assert config.file_enabled is False

    def test_logging_level_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_logging_invalid_level(self):
        with pytest.raises(ValueError):
            LoggingConfig(level="loud")

    def test_logging_invalid_format(self):
        with pytest.raises(ValueError):
            LoggingConfig(format="xml")

    def test_output_defaults(self):
        config = OutputConfig()
        assert config.input_encoding == "utf-8"
        assert config.language == "en"
        assert config.stylesheet_urls[-1] == "tagcloud.css"

    def test_output_env_prefix(self, monkeypatch):
        monkeypatch.setenv("OUTPUT_LANGUAGE", "ja")
        assert OutputConfig().language == "ja"

    def test_get_and_reload(self):
        config = get_config()
        assert isinstance(config, AppConfig)
        assert get_config() is config
        reloaded = reload_config()
        assert reloaded is not config
        assert get_config() is reloaded


class TestDotenvSettings:
    """.env ファイルからの設定読み込み"""

    @pytest.fixture
    def dotenv_dir(self, temp_dir, monkeypatch):
        for name in ("LOGGING_LEVEL", "LOGGING_FORMAT", "OUTPUT_LANGUAGE"):
            monkeypatch.delenv(name, raising=False)
        (temp_dir / ".env").write_text(
            "LOGGING_LEVEL=ERROR\nOUTPUT_LANGUAGE=ja\nTAGCLOUD_CLAMP_FONT=false\n",
            encoding="utf-8",
        )
        monkeypatch.chdir(temp_dir)
        yield temp_dir
        monkeypatch.undo()
        reload_config()

    def test_nested_settings_read_dotenv(self, dotenv_dir):
        config = reload_config()

        assert config.logging.level == "ERROR"
        assert config.output.language == "ja"

    def test_get_config_after_reload(self, dotenv_dir):
        reload_config()
        config = get_config()

        assert [config.logging.level, config.output.language] == ["ERROR", "ja"]

    def test_nested_defaults_are_not_shared(self, dotenv_dir):
        first = AppConfig()
        second = AppConfig()

        assert first.logging is not second.logging
        assert first.output.language == second.output.language == "ja"
