# -*- coding: utf-8 -*-
"""
単語頻度集計

トークン列から区切りトークンを除き、小文字化した単語ごとの出現回数を数えます。
"""

import io
import logging
from collections import Counter
from typing import Dict, FrozenSet, Iterable, Iterator, Mapping

from .tokenizer import tokenize_lines
from ..error_handling import StreamReadError

logger = logging.getLogger(__name__)

FrequencyMap = Dict[str, int]


class _LineReader:
    """読み込んだ行数を記録しながら行を供給する"""

    def __init__(self, lines: Iterable[str]):
        self._lines = lines
        self.lines_read = 0

    def __iter__(self) -> Iterator[str]:
        for line in self._lines:
            self.lines_read += 1
            yield line


def aggregate(lines: Iterable[str], separators: FrozenSet[str]) -> FrequencyMap:
    """行ストリームを最後まで読み、単語頻度辞書を生成

    Args:
        lines: 行を順に返すイテラブル（ファイルオブジェクト等）
        separators: 区切り文字集合

    Returns:
        単語 -> 出現回数 の辞書

    Raises:
        StreamReadError: ストリームの読み込みに失敗した場合。
            失敗時点までの集計結果を partial_frequencies に保持する
    """
    frequencies: Counter = Counter()
    reader = _LineReader(lines)

    try:
        for token in tokenize_lines(reader, separators):
            if not token.separator:
                frequencies[token.text.lower()] += 1
    except (OSError, UnicodeDecodeError) as e:
        raise StreamReadError(
            f"入力ストリームの読み込みに失敗しました（{reader.lines_read}行目以降）: {e}",
            partial_frequencies=frequencies,
            lines_read=reader.lines_read,
        ) from e

    logger.debug(f"集計完了: {reader.lines_read}行, 異なり語数={len(frequencies)}")
    return dict(frequencies)


def aggregate_text(text: str, separators: FrozenSet[str]) -> FrequencyMap:
    """文字列全体を集計（改行は \\n, \\r\\n, \\r のいずれも行区切りとして扱う）"""
    return aggregate(io.StringIO(text, newline=None), separators)


def merge_frequencies(*frequency_maps: Mapping[str, int]) -> FrequencyMap:
    """分割集計した頻度辞書を単語ごとの合計で統合"""
    merged: Counter = Counter()
    for frequencies in frequency_maps:
        merged.update(frequencies)
    return dict(merged)
