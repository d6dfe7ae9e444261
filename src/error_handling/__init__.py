# -*- coding: utf-8 -*-

"""
エラーハンドリングモジュール
"""

from .custom_exceptions import (
    ErrorContext,
    TagCloudError,
    InputError,
    InputFileError,
    InvalidCountError,
    AggregationError,
    StreamReadError,
    ConfigurationError,
    RenderError,
    HTMLGenerationError
)

from .error_handler import (
    ErrorHandler,
    error_context
)

__all__ = [
    # 例外クラス
    'ErrorContext',
    'TagCloudError',
    'InputError',
    'InputFileError',
    'InvalidCountError',
    'AggregationError',
    'StreamReadError',
    'ConfigurationError',
    'RenderError',
    'HTMLGenerationError',

    # ハンドラー
    'ErrorHandler',
    'error_context'
]
