# -*- coding: utf-8 -*-
"""
トークナイザー

テキストを「区切り文字の最大連続」と「非区切り文字の最大連続」に分割します。
トークンを順に連結すると元のテキストに戻ります。
"""

from typing import FrozenSet, Iterable, Iterator, NamedTuple

from .separators import is_separator


class Token(NamedTuple):
    """トークン"""

    text: str
    separator: bool


def next_token(text: str, position: int, separators: FrozenSet[str]) -> str:
    """position から始まる最大長の単語または区切り文字列を返す

    Args:
        text: 対象テキスト
        position: 開始位置（0 <= position < len(text)）
        separators: 区切り文字集合

    Returns:
        text[position:end] の部分文字列。end は len(text) か、
        分類が反転する文字の位置
    """
    if not 0 <= position < len(text):
        raise ValueError(f"位置が範囲外です: position={position}, len={len(text)}")

    kind = is_separator(text[position], separators)
    end = position
    while end < len(text) and is_separator(text[end], separators) == kind:
        end += 1
    return text[position:end]


def iter_tokens(text: str, separators: FrozenSet[str]) -> Iterator[Token]:
    """1行（または1つの文字列）をトークン列に変換"""
    position = 0
    while position < len(text):
        token = next_token(text, position, separators)
        yield Token(token, is_separator(token[0], separators))
        position += len(token)


def _strip_line_terminator(line: str) -> str:
    # 行末の改行を1つだけ除去（\r\n, \n, \r）
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


def tokenize_lines(lines: Iterable[str], separators: FrozenSet[str]) -> Iterator[Token]:
    """行の並びをトークン列に変換

    各行は独立にトークン化されるため、行末が隣接する単語に
    結合されることはありません。空行はトークンを生成しません。
    """
    for line in lines:
        yield from iter_tokens(_strip_line_terminator(line), separators)
