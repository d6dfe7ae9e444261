# -*- coding: utf-8 -*-

"""
カスタム例外クラス

例外はパイプラインのどの段階で失敗したか（stage）で分類する。
  input        入力ファイル・表示単語数
  aggregation  入力ストリームの読み込みと頻度集計
  config       設定値
  render       HTML出力
"""

from typing import Optional, Any, Dict
from dataclasses import dataclass


@dataclass
class ErrorContext:
    """エラー発生時のコンテキスト情報"""
    operation: str
    component: str
    timestamp: str
    details: Optional[Dict[str, Any]] = None


class TagCloudError(Exception):
    """タグクラウドアプリケーションのベース例外"""

    stage = "general"

    def __init__(self, message: str, context: Optional[ErrorContext] = None):
        super().__init__(message)
        self.context = context


class InputError(TagCloudError):
    """入力段階のエラー"""

    stage = "input"


class InputFileError(InputError):
    """入力ファイルを開けない"""


class InvalidCountError(InputError):
    """表示単語数が整数として解釈できない"""

    def __init__(self, raw_value: Any, context: Optional[ErrorContext] = None):
        super().__init__(f"表示単語数が不正です: {raw_value!r}", context)
        self.raw_value = raw_value


class AggregationError(TagCloudError):
    """頻度集計段階のエラー"""

    stage = "aggregation"


class StreamReadError(AggregationError):
    """入力ストリーム読み込みエラー

    読み込みが失敗した時点までの集計結果を保持する。
    """

    def __init__(
        self,
        message: str,
        partial_frequencies: Optional[Dict[str, int]] = None,
        lines_read: int = 0,
        context: Optional[ErrorContext] = None,
    ):
        super().__init__(message, context)
        self.partial_frequencies = dict(partial_frequencies or {})
        self.lines_read = lines_read


class ConfigurationError(TagCloudError):
    """設定関連エラー"""

    stage = "config"


class RenderError(TagCloudError):
    """出力段階のエラー"""

    stage = "render"


class HTMLGenerationError(RenderError):
    """HTML生成関連エラー"""
