# -*- coding: utf-8 -*-

"""
設定管理モジュール
"""

from .base import (
    AppConfig,
    LoggingConfig,
    OutputConfig,
    get_config,
    reload_config,
)

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "OutputConfig",
    "get_config",
    "reload_config",
]
