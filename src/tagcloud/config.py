# -*- coding: utf-8 -*-
"""
タグクラウド設定管理モジュール

トークン化とフォントサイズ算出に関する設定を管理します。
"""

import os
from dataclasses import dataclass
from typing import List

from .separators import DEFAULT_SEPARATORS
from .scaler import MIN_FONT, MAX_FONT, FONT_SPAN
from ..error_handling import ConfigurationError


@dataclass
class TagCloudConfig:
    """タグクラウド生成設定"""

    # トークン化設定
    separators: str = DEFAULT_SEPARATORS

    # フォント設定
    min_font: int = MIN_FONT
    max_font: int = MAX_FONT
    font_span: int = FONT_SPAN
    clamp_font: bool = True

    # 表示単語数（CLIで未指定の場合）
    default_word_count: int = 100


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} は整数である必要があります: {value!r}")


def load_tagcloud_config() -> TagCloudConfig:
    """環境変数を考慮してタグクラウド設定を読み込み"""

    config = TagCloudConfig()

    # 環境変数からの設定上書き（空文字列の区切り指定も有効）
    separators = os.getenv("TAGCLOUD_SEPARATORS")
    if separators is not None:
        config.separators = separators

    if os.getenv("TAGCLOUD_CLAMP_FONT"):
        config.clamp_font = _env_bool(os.getenv("TAGCLOUD_CLAMP_FONT"))

    if os.getenv("TAGCLOUD_DEFAULT_WORD_COUNT"):
        config.default_word_count = _env_int(
            "TAGCLOUD_DEFAULT_WORD_COUNT", os.getenv("TAGCLOUD_DEFAULT_WORD_COUNT")
        )

    return config


def get_tagcloud_config() -> TagCloudConfig:
    """タグクラウド設定のシングルトンアクセス"""
    if not hasattr(get_tagcloud_config, "_config"):
        get_tagcloud_config._config = load_tagcloud_config()
    return get_tagcloud_config._config


# 設定バリデーション関数
def validate_config(config: TagCloudConfig) -> List[str]:
    """設定の妥当性をチェック"""
    errors = []

    if config.separators is None:
        errors.append("区切り文字が設定されていません")

    if config.min_font >= config.max_font:
        errors.append("最小フォントサイズは最大フォントサイズより小さい必要があります")

    if config.font_span < 0:
        errors.append("フォントサイズの幅は0以上である必要があります")

    if config.default_word_count < 0:
        errors.append("表示単語数は0以上である必要があります")

    return errors
