# -*- coding: utf-8 -*-

"""
HTMLテンプレートエンジン
"""

from typing import List, Optional
from dataclasses import dataclass, field
import html

from ..tagcloud.scaler import ScaledEntry, font_class


@dataclass
class TemplateData:
    """テンプレート用データ"""

    input_name: str
    word_count: int
    entries: List[ScaledEntry]
    stylesheet_urls: List[str] = field(default_factory=list)
    language: str = "en"
    title: Optional[str] = None


class HTMLTemplateEngine:
    """HTMLテンプレート生成エンジン"""

    def generate_html(self, data: TemplateData) -> str:
        """HTML文書の生成"""
        title = data.title or self.default_title(data.input_name, data.word_count)
        parts = [
            self._build_header(title, data),
            self._build_body(data.entries),
            self._build_footer(),
        ]
        return "\n".join(part for part in parts if part) + "\n"

    @staticmethod
    def default_title(input_name: str, word_count: int) -> str:
        """見出し文字列（例: Top 3 words in data.txt）"""
        return f"Top {word_count} words in {input_name}"

    def _build_header(self, title: str, data: TemplateData) -> str:
        """ヘッダー部分の構築"""
        escaped_title = html.escape(title)
        stylesheets = "\n".join(
            f'<link href="{html.escape(url)}" rel="stylesheet" type="text/css">'
            for url in data.stylesheet_urls
        )
        header = f"""<!DOCTYPE html>
<html lang="{html.escape(data.language)}">
<head>
<meta charset="UTF-8">
<title>{escaped_title}</title>"""
        if stylesheets:
            header += "\n" + stylesheets
        header += f"""
</head>
<body>
<h2>{escaped_title}</h2>
<div class="cdiv">
<p class="cbox">"""
        return header

    def _build_body(self, entries: List[ScaledEntry]) -> str:
        """単語ごとの span 要素（渡された順序のまま出力）"""
        return "\n".join(self._render_entry(entry) for entry in entries)

    def _render_entry(self, entry: ScaledEntry) -> str:
        return (
            f"<span style=\"cursor:default\" class=\"{font_class(entry.bucket)}\" "
            f"title=\"count: {entry.count}\">{html.escape(entry.word)}</span>"
        )

    def _build_footer(self) -> str:
        """フッター部分の構築"""
        return """</p>
</div>
</body>
</html>"""
