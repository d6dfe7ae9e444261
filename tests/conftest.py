# -*- coding: utf-8 -*-

import logging
import pytest
import tempfile
from pathlib import Path

from config.base import AppConfig, LoggingConfig, OutputConfig
from src.logging_config import setup_logging
from src.tagcloud import TagCloudConfig


SAMPLE_TEXT = "the cat sat on the mat. the cat ran."


@pytest.fixture
def temp_dir():
    """一時ディレクトリ作成"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_config(temp_dir):
    """テスト用設定"""
    log_path = temp_dir / "test.log"
    
    return AppConfig(
        output=OutputConfig(
            stylesheet_urls=["tagcloud.css"]
        ),
        logging=LoggingConfig(
            level="DEBUG",
            format="text",
            file_enabled=False,
            file_path=str(log_path)
        )
    )


@pytest.fixture
def sample_text():
    """サンプル文書"""
    return SAMPLE_TEXT


@pytest.fixture
def sentence_config():
    """空白とピリオドのみを区切り文字とする設定"""
    return TagCloudConfig(separators=" .")


@pytest.fixture
def sample_file(temp_dir, sample_text):
    """サンプル文書ファイル"""
    path = temp_dir / "sample.txt"
    path.write_text(sample_text + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def setup_test_logging(test_config):
    """テスト用ログ設定（全テストで自動適用）"""
    setup_logging(test_config.logging)
    yield
    # ハンドラーを閉じる
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)
