# -*- coding: utf-8 -*-
"""
タグクラウド生成エンジン

トークン化・頻度集計・上位選択・フォントサイズ算出を統合的に管理します。
"""

import io
import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .config import TagCloudConfig, validate_config
from .separators import make_separator_set
from .aggregator import aggregate
from .ranker import select_top
from .scaler import ScaledEntry, scale_entries
from ..error_handling import ConfigurationError, ErrorHandler, StreamReadError


@dataclass
class TagCloudResult:
    """タグクラウド生成結果"""

    success: bool
    entries: List[ScaledEntry] = field(default_factory=list)
    frequencies: Dict[str, int] = field(default_factory=dict)
    word_count: int = 0
    requested_count: int = 0
    total_words: int = 0
    unique_words: int = 0
    generation_time_ms: int = 0
    stream_error: Optional[StreamReadError] = None
    error_message: Optional[str] = None

    @property
    def partial(self) -> bool:
        """入力の途中で読み込みが失敗し、部分的な集計結果を使ったか"""
        return self.stream_error is not None


class TagCloudGenerator:
    """タグクラウド生成エンジン

    行ストリームから表示用の (単語, 出現回数, フォントクラス) の並びを生成します。
    """

    def __init__(self, config: Optional[TagCloudConfig] = None, logger: Optional[logging.Logger] = None):
        """初期化

        Args:
            config: タグクラウド設定
            logger: ロガー
        """
        self.config = config or TagCloudConfig()
        self.logger = logger or logging.getLogger(__name__)

        errors = validate_config(self.config)
        if errors:
            raise ConfigurationError("; ".join(errors))

        self.separators = make_separator_set(self.config.separators)
        self.error_handler = ErrorHandler(self.logger)

    def generate(self, lines: Iterable[str], word_count: int) -> TagCloudResult:
        """タグクラウドを生成

        Args:
            lines: 入力テキストの行ストリーム
            word_count: 表示する単語数

        Returns:
            タグクラウド生成結果
        """
        start_time = time.time()
        stream_error = None

        try:
            # 1. 頻度集計（読み込み失敗時はそこまでの集計結果で続行）
            try:
                frequencies = aggregate(lines, self.separators)
            except StreamReadError as e:
                context = self.error_handler.create_context(
                    operation="aggregate",
                    component="TagCloudGenerator",
                    details={"lines_read": e.lines_read},
                )
                self.error_handler.handle_error(e, context, reraise=False)
                frequencies = e.partial_frequencies
                stream_error = e

            # 2. 上位選択
            display_set = select_top(frequencies, word_count)

            # 3. フォントサイズ算出
            entries = scale_entries(
                display_set,
                min_font=self.config.min_font,
                max_font=self.config.max_font,
                span=self.config.font_span,
                clamp=self.config.clamp_font,
            )

            generation_time_ms = int((time.time() - start_time) * 1000)
            self.logger.debug(
                f"タグクラウド生成: 異なり語数={len(frequencies)}, 表示={len(entries)}, "
                f"{generation_time_ms}ms"
            )

            return TagCloudResult(
                success=True,
                entries=entries,
                frequencies=frequencies,
                word_count=len(entries),
                requested_count=word_count,
                total_words=sum(frequencies.values()),
                unique_words=len(frequencies),
                generation_time_ms=generation_time_ms,
                stream_error=stream_error,
                error_message=str(stream_error) if stream_error else None,
            )

        except Exception as e:
            self.logger.error(f"タグクラウド生成エラー: {e}", exc_info=True)
            return TagCloudResult(
                success=False,
                requested_count=word_count,
                generation_time_ms=int((time.time() - start_time) * 1000),
                error_message=f"生成エラー: {e}",
            )

    def generate_from_text(self, text: str, word_count: int) -> TagCloudResult:
        """文字列からタグクラウドを生成"""
        return self.generate(io.StringIO(text, newline=None), word_count)
