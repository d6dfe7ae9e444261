# -*- coding: utf-8 -*-
"""
フォントサイズ算出

出現回数を、表示対象内の最小・最大出現回数の間で線形に
フォントサイズクラス（f11〜f48）へ対応付けます。
"""

from typing import List, NamedTuple

from .ranker import DisplaySet

MIN_FONT = 11
MAX_FONT = 48
# オフセット前の幅
FONT_SPAN = 38


class ScaledEntry(NamedTuple):
    """フォントサイズクラス付きの表示エントリ"""

    word: str
    count: int
    bucket: int


def font_bucket(
    count: int,
    max_count: int,
    min_count: int,
    *,
    min_font: int = MIN_FONT,
    max_font: int = MAX_FONT,
    span: int = FONT_SPAN,
    clamp: bool = True,
) -> int:
    """出現回数からフォントサイズクラスを計算

    min_font + span * (count - min_count) // (max_count - min_count) を
    整数除算（切り捨て）で求める。max_count == min_count なら max_font。

    Args:
        count: 対象の出現回数
        max_count: 表示対象内の最大出現回数
        min_count: 表示対象内の最小出現回数
        min_font: 最小フォントクラス
        max_font: 最大フォントクラス
        span: 線形補間の幅
        clamp: True なら結果を [min_font, max_font] に収める。
            False なら計算値をそのまま返す（最大出現回数で min_font + span）

    Returns:
        フォントサイズクラス
    """
    if max_count <= min_count:
        return max_font

    bucket = min_font + span * (count - min_count) // (max_count - min_count)
    if clamp:
        bucket = max(min_font, min(bucket, max_font))
    return bucket


def font_class(bucket: int) -> str:
    """CSSクラス名（例: f30）"""
    return f"f{bucket}"


def scale_entries(
    display_set: DisplaySet,
    *,
    min_font: int = MIN_FONT,
    max_font: int = MAX_FONT,
    span: int = FONT_SPAN,
    clamp: bool = True,
) -> List[ScaledEntry]:
    """DisplaySet の各エントリにフォントサイズクラスを付与（順序は維持）"""
    return [
        ScaledEntry(
            entry.word,
            entry.count,
            font_bucket(
                entry.count,
                display_set.max_count,
                display_set.min_count,
                min_font=min_font,
                max_font=max_font,
                span=span,
                clamp=clamp,
            ),
        )
        for entry in display_set
    ]
