# -*- coding: utf-8 -*-
"""
タグクラウド生成モジュール

テキスト文書から出現頻度上位 N 語を選び、頻度に応じたフォントサイズを付与します。
主要コンポーネント:
- 区切り文字判定 (separators.py)
- トークナイザー (tokenizer.py)
- 頻度集計 (aggregator.py)
- 上位選択 (ranker.py)
- フォントサイズ算出 (scaler.py)
- 生成エンジン (generator.py)
- 設定管理 (config.py)
"""

from .config import TagCloudConfig, load_tagcloud_config, get_tagcloud_config, validate_config
from .separators import DEFAULT_SEPARATORS, make_separator_set, is_separator
from .tokenizer import Token, next_token, iter_tokens, tokenize_lines
from .aggregator import FrequencyMap, aggregate, aggregate_text, merge_frequencies
from .ranker import RankedEntry, DisplaySet, clamp_word_count, select_top
from .scaler import MIN_FONT, MAX_FONT, FONT_SPAN, ScaledEntry, font_bucket, font_class, scale_entries
from .generator import TagCloudGenerator, TagCloudResult

__version__ = "1.0.0"

__all__ = [
    "TagCloudConfig",
    "load_tagcloud_config",
    "get_tagcloud_config",
    "validate_config",
    "DEFAULT_SEPARATORS",
    "make_separator_set",
    "is_separator",
    "Token",
    "next_token",
    "iter_tokens",
    "tokenize_lines",
    "FrequencyMap",
    "aggregate",
    "aggregate_text",
    "merge_frequencies",
    "RankedEntry",
    "DisplaySet",
    "clamp_word_count",
    "select_top",
    "MIN_FONT",
    "MAX_FONT",
    "FONT_SPAN",
    "ScaledEntry",
    "font_bucket",
    "font_class",
    "scale_entries",
    "TagCloudGenerator",
    "TagCloudResult",
]
