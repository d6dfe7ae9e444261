# -*- coding: utf-8 -*-

"""
上位単語選択のユニットテスト
"""

import pytest

from src.tagcloud.ranker import (
    DisplaySet,
    RankedEntry,
    clamp_word_count,
    display_order,
    select_top,
    selection_order,
)


SAMPLE_FREQUENCIES = {"the": 3, "cat": 2, "sat": 1, "on": 1, "mat": 1, "ran": 1}


class TestClampWordCount:

    @pytest.mark.parametrize(
        "n, available, expected",
        [(-5, 10, 0), (0, 10, 0), (3, 10, 3), (10, 10, 10), (25, 10, 10), (4, 0, 0)],
    )
    def test_clamp(self, n, available, expected):
        assert clamp_word_count(n, available) == expected


class TestSelectionOrder:

    def test_count_descending_then_word_descending(self):
        entries = selection_order(SAMPLE_FREQUENCIES)
        assert entries == [
            RankedEntry("the", 3),
            RankedEntry("cat", 2),
            RankedEntry("sat", 1),
            RankedEntry("ran", 1),
            RankedEntry("on", 1),
            RankedEntry("mat", 1),
        ]


class TestDisplayOrder:

    def test_word_ascending(self):
        entries = [RankedEntry("the", 3), RankedEntry("cat", 2), RankedEntry("sat", 1)]
        assert [entry.word for entry in display_order(entries)] == ["cat", "sat", "the"]

    def test_count_descending_on_same_word(self):
        entries = [RankedEntry("a", 1), RankedEntry("a", 5), RankedEntry("b", 2)]
        assert display_order(entries) == [
            RankedEntry("a", 5),
            RankedEntry("a", 1),
            RankedEntry("b", 2),
        ]

    def test_input_list_untouched(self):
        entries = [RankedEntry("b", 1), RankedEntry("a", 1)]
        display_order(entries)
        assert entries == [RankedEntry("b", 1), RankedEntry("a", 1)]


class TestSelectTop:

    def test_sample_top_three(self):
        """同数の境界では辞書順で後ろの単語が選ばれる"""
        display_set = select_top(SAMPLE_FREQUENCIES, 3)

        assert list(display_set) == [
            RankedEntry("cat", 2),
            RankedEntry("sat", 1),
            RankedEntry("the", 3),
        ]
        assert display_set.min_count == 1
        assert display_set.max_count == 3

    def test_tie_break_prefers_later_words(self):
        display_set = select_top({"apple": 1, "banana": 1, "cherry": 1}, 2)
        assert [entry.word for entry in display_set] == ["banana", "cherry"]

    def test_min_max_are_from_selected_entries_only(self):
        frequencies = {"a": 10, "b": 7, "c": 5, "d": 1}
        display_set = select_top(frequencies, 3)
        assert display_set.min_count == 5
        assert display_set.max_count == 10

    def test_n_larger_than_vocabulary(self):
        display_set = select_top(SAMPLE_FREQUENCIES, 100)
        assert len(display_set) == len(SAMPLE_FREQUENCIES)
        assert [entry.word for entry in display_set] == ["cat", "mat", "on", "ran", "sat", "the"]

    @pytest.mark.parametrize("n", [0, -1])
    def test_zero_or_negative(self, n):
        display_set = select_top(SAMPLE_FREQUENCIES, n)
        assert len(display_set) == 0
        assert display_set.min_count == 1
        assert display_set.max_count == 1

    def test_empty_frequencies(self):
        assert select_top({}, 10) == DisplaySet()

    def test_frequencies_not_mutated(self):
        frequencies = dict(SAMPLE_FREQUENCIES)
        select_top(frequencies, 3)
        assert frequencies == SAMPLE_FREQUENCIES

    def test_deterministic(self):
        """同じ入力なら同じ結果"""
        frequencies = {f"w{i}": i % 4 + 1 for i in range(50)}
        first = select_top(frequencies, 17)
        second = select_top(dict(reversed(list(frequencies.items()))), 17)
        assert first == second
