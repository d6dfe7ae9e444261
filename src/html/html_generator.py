# -*- coding: utf-8 -*-

"""
タグクラウドHTMLジェネレーター
"""
from typing import List, Optional
import logging

from .template_engine import HTMLTemplateEngine, TemplateData
from ..tagcloud.generator import TagCloudResult
from ..error_handling import HTMLGenerationError, error_context


class HTMLGenerator:
    """HTMLファイル生成器"""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        stylesheet_urls: Optional[List[str]] = None,
        language: str = "en",
        encoding: str = "utf-8",
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.template_engine = HTMLTemplateEngine()
        self.stylesheet_urls = list(stylesheet_urls or [])
        self.language = language
        self.encoding = encoding

    def render(self, result: TagCloudResult, input_name: str) -> str:
        """生成結果からHTML文字列を作成"""
        template_data = TemplateData(
            input_name=input_name,
            word_count=result.word_count,
            entries=result.entries,
            stylesheet_urls=self.stylesheet_urls,
            language=self.language,
        )
        return self.template_engine.generate_html(template_data)

    def generate_html_file(self, result: TagCloudResult, output_path: str, input_name: str) -> None:
        """
        HTMLファイルの生成

        Args:
            result: タグクラウド生成結果
            output_path: 出力ファイルパス
            input_name: 見出しに表示する入力名
        """
        with error_context("html_generation", "HTMLGenerator", self.logger):
            html_content = self.render(result, input_name)

            # ファイル出力
            self._write_html_file(html_content, output_path)

            self.logger.info(
                f"HTMLファイルが正常に生成されました: {output_path} (単語数: {result.word_count}件)"
            )

    def _write_html_file(self, html_content: str, output_path: str) -> None:
        """HTMLファイルの書き込み"""
        try:
            with open(output_path, "w", encoding=self.encoding) as f:
                f.write(html_content)
        except OSError as e:
            raise HTMLGenerationError(f"HTMLファイルの書き込みに失敗しました: {e}") from e
