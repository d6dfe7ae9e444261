# -*- coding: utf-8 -*-

"""
タグクラウド処理のメインロジック
"""

import time
import logging
from typing import Optional

from src.logging_config import get_logger, log_with_context
from src.tagcloud import TagCloudConfig, TagCloudGenerator, TagCloudResult, get_tagcloud_config
from src.html.html_generator import HTMLGenerator
from src.error_handling import InputFileError
from config.base import AppConfig, get_config


class TagCloudProcessor:
    """入力ファイルからタグクラウドHTMLを生成するメインクラス"""

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        tagcloud_config: Optional[TagCloudConfig] = None,
    ):
        self.logger = get_logger(__name__)
        self.config: AppConfig = config or get_config()
        self.tagcloud_config = tagcloud_config or get_tagcloud_config()
        self.generator = TagCloudGenerator(self.tagcloud_config, self.logger)
        self.html_generator = HTMLGenerator(
            self.logger,
            stylesheet_urls=self.config.output.stylesheet_urls,
            language=self.config.output.language,
            encoding=self.config.output.output_encoding,
        )

    def run(self, input_path: str, output_path: str, word_count: int) -> TagCloudResult:
        """
        タグクラウド生成を実行

        Args:
            input_path: 入力テキストファイル
            output_path: 出力HTMLファイル
            word_count: 表示する単語数（負数は0として扱う）

        Returns:
            タグクラウド生成結果。生成に失敗した場合HTMLは出力しない

        Raises:
            InputFileError: 入力ファイルを開けない場合
            HTMLGenerationError: HTMLの書き込みに失敗した場合
        """
        start_time = time.time()

        if word_count < 0:
            self.logger.warning(f"表示単語数が負数のため0として扱います: {word_count}")
            word_count = 0

        result = self._generate(input_path, word_count)
        if not result.success:
            self.logger.error(f"タグクラウドの生成に失敗しました: {result.error_message}")
            return result

        if result.partial:
            self.logger.warning(
                f"入力の読み込みが途中で失敗したため、{result.stream_error.lines_read}行目までの集計結果を使用します"
            )

        self.html_generator.generate_html_file(result, output_path, input_path)

        log_with_context(
            self.logger,
            logging.INFO,
            "タグクラウド生成完了",
            operation="tag_cloud",
            input=input_path,
            output=output_path,
            count=result.word_count,
            unique_words=result.unique_words,
            total_words=result.total_words,
            duration_ms=int((time.time() - start_time) * 1000),
            status="partial" if result.partial else "ok",
        )
        return result

    def _generate(self, input_path: str, word_count: int) -> TagCloudResult:
        """入力ファイルを開いて生成エンジンに渡す"""
        try:
            input_file = open(input_path, "r", encoding=self.config.output.input_encoding)
        except OSError as e:
            raise InputFileError(f"入力ファイルを開けません: {input_path}: {e}") from e

        with input_file:
            return self.generator.generate(input_file, word_count)
