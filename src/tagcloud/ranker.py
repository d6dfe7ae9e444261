# -*- coding: utf-8 -*-
"""
上位単語の選択

出現回数の多い順（同数なら単語の辞書順で後ろのもの優先）に N 件を選び、
表示用に単語のアルファベット順へ並べ替えます。
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Mapping, NamedTuple


class RankedEntry(NamedTuple):
    """表示対象として選ばれた単語と出現回数"""

    word: str
    count: int


def _word_key(entry: RankedEntry) -> str:
    # 大文字小文字を区別しない比較
    return entry.word.lower()


def _count_key(entry: RankedEntry) -> int:
    return entry.count


@dataclass(frozen=True)
class DisplaySet:
    """表示用に並べ替えた上位 N 件と、その中の最小・最大出現回数"""

    entries: List[RankedEntry] = field(default_factory=list)
    min_count: int = 1
    max_count: int = 1

    def __iter__(self) -> Iterator[RankedEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def clamp_word_count(n: int, available: int) -> int:
    """表示数を 0 以上、異なり語数以下に丸める"""
    if n < 0:
        return 0
    return min(n, available)


def selection_order(frequencies: Mapping[str, int]) -> List[RankedEntry]:
    """選択順（出現回数の降順、同数なら単語の降順）に並べたエントリ"""
    entries = [RankedEntry(word, count) for word, count in frequencies.items()]
    # 安定ソートを2回: 副キー -> 主キーの順
    entries.sort(key=_word_key, reverse=True)
    entries.sort(key=_count_key, reverse=True)
    return entries


def display_order(entries: List[RankedEntry]) -> List[RankedEntry]:
    """表示順（単語の昇順、同じ単語なら出現回数の降順）に並べ替えたコピー"""
    ordered = sorted(entries, key=_count_key, reverse=True)
    ordered.sort(key=_word_key)
    return ordered


def select_top(frequencies: Mapping[str, int], n: int) -> DisplaySet:
    """頻度辞書から上位 n 件を選択し、表示順に並べて返す

    Args:
        frequencies: 単語 -> 出現回数（変更されない）
        n: 表示する単語数。負数は0、異なり語数超過は異なり語数に丸める

    Returns:
        DisplaySet。空の場合は min_count = max_count = 1
    """
    n = clamp_word_count(n, len(frequencies))
    selected = selection_order(frequencies)[:n]

    if not selected:
        return DisplaySet()

    return DisplaySet(
        entries=display_order(selected),
        min_count=selected[-1].count,
        max_count=selected[0].count,
    )
