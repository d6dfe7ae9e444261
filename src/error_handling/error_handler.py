# -*- coding: utf-8 -*-

"""
エラーハンドリング機能
"""

import logging
from typing import Any, Dict, Optional
from contextlib import contextmanager
from datetime import datetime

from .custom_exceptions import ErrorContext, TagCloudError


class ErrorHandler:
    """失敗した段階とコンテキストを付けてエラーを記録する"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def handle_error(
        self,
        error: Exception,
        context: Optional[ErrorContext] = None,
        reraise: bool = True
    ) -> None:
        """エラーをログに記録し、必要なら再送出する

        Args:
            error: 発生した例外
            context: 発生箇所の情報（省略時は例外に付いているものを使う）
            reraise: True なら記録後にそのまま送出
        """
        stage = getattr(error, "stage", "unexpected")
        context = context or getattr(error, "context", None)

        log_data: Dict[str, Any] = {
            'stage': stage,
            'error_class': error.__class__.__name__,
        }
        if context:
            log_data.update({
                'operation': context.operation,
                'component': context.component,
                'timestamp': context.timestamp,
                **(context.details or {})
            })

        self.logger.error(
            f"[{stage}] {error}",
            exc_info=(type(error), error, error.__traceback__),
            extra={'extra_data': log_data},
        )

        if reraise:
            raise error

    def create_context(
        self,
        operation: str,
        component: str,
        details: Optional[Dict[str, Any]] = None
    ) -> ErrorContext:
        """エラーコンテキストの作成"""
        return ErrorContext(
            operation=operation,
            component=component,
            timestamp=datetime.now().isoformat(),
            details=details or {}
        )


@contextmanager
def error_context(
    operation: str,
    component: str,
    logger: Optional[logging.Logger] = None,
    details: Optional[Dict[str, Any]] = None
):
    """
    処理ブロックで起きた例外を記録して再送出する

    TagCloudError にコンテキストが無ければこのブロックのものを付ける。

    Usage:
        with error_context("html_generation", "HTMLGenerator") as ctx:
            ...
    """
    handler = ErrorHandler(logger)
    context = handler.create_context(operation, component, details)

    try:
        yield context
    except Exception as e:
        if isinstance(e, TagCloudError) and e.context is None:
            e.context = context
        handler.handle_error(e, context, reraise=True)
