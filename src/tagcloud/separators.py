# -*- coding: utf-8 -*-
"""
区切り文字判定

区切り文字指定文字列から文字の所属判定を構築します。
"""

from typing import FrozenSet

# 既定の区切り文字（空白・改行・句読点・記号・数字）
DEFAULT_SEPARATORS = " \t\r\n.,:;'\"{}[]|/<>?!`~0123456789@#$%^&*()-_=+"


def make_separator_set(chars: str) -> FrozenSet[str]:
    """区切り文字指定から区切り文字集合を生成

    Args:
        chars: 区切り文字を列挙した文字列（重複は無視される）

    Returns:
        区切り文字の集合。空文字列なら空集合（どの文字も区切りにならない）
    """
    if chars is None:
        raise ValueError("区切り文字指定がNoneです")
    return frozenset(chars)


def is_separator(char: str, separators: FrozenSet[str]) -> bool:
    """文字が区切り文字かどうか（大文字小文字を区別）"""
    return char in separators
