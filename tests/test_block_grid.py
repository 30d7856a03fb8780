#!/usr/bin/env python3
"""
ブロックグリッド生成のユニットテスト

作業時間帯の敷き詰め・昼休憩の割り込み・入力検証をテストします。
"""

import sys
import os
import pytest

# プロジェクトルートをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from skillplan.algorithms.block_grid import GridSlot, build_day_grid, grid_work_capacity
from skillplan.models import (
    BlockType, Lunch, InvalidWindow, InvalidRhythm, InvalidLunch, InvalidSettings, parse_hhmm
)

W, B, L, F = BlockType.WORK, BlockType.BREAK, BlockType.LUNCH, BlockType.BUFFER


def as_tuples(slots):
    return [(s.block_type, s.start, s.end) for s in slots]


def assert_tiles(slots, start_time, end_time):
    """スロットが作業時間帯を隙間なく覆っていることを確認"""
    assert slots[0].start == parse_hhmm(start_time)
    assert slots[-1].end == parse_hhmm(end_time)
    for prev, nxt in zip(slots, slots[1:]):
        assert prev.end == nxt.start
    for slot in slots:
        assert slot.minutes > 0
    assert sum(s.minutes for s in slots) == parse_hhmm(end_time) - parse_hhmm(start_time)


class TestBuildDayGrid:
    """build_day_gridのテスト"""

    def test_two_hour_window(self):
        """作業2回の後、余りは予備になる"""
        slots = build_day_grid("09:00", "11:00", 50, 10)
        assert as_tuples(slots) == [
            (W, 540, 590),
            (B, 590, 600),
            (W, 600, 650),
            (F, 650, 660),
        ]

    def test_full_day_with_lunch(self):
        """昼休憩が1回だけ入り、他のブロックと重ならない"""
        slots = build_day_grid("09:00", "17:00", 50, 10, Lunch(start="13:00", duration=60))
        assert_tiles(slots, "09:00", "17:00")

        lunches = [s for s in slots if s.block_type == L]
        assert len(lunches) == 1
        assert (lunches[0].start, lunches[0].end, lunches[0].minutes) == (780, 840, 60)
        for slot in slots:
            if slot.block_type != L:
                assert slot.end <= 780 or slot.start >= 840

        # 最後の作業の後は休憩ではなく予備
        assert as_tuples(slots)[-2:] == [(W, 960, 1010), (F, 1010, 1020)]

    def test_lunch_truncates_work_block(self):
        """昼休憩にかかる作業ブロックは昼休憩開始で打ち切られる"""
        slots = build_day_grid("09:00", "12:00", 50, 10, Lunch(start="10:30", duration=30))
        assert as_tuples(slots) == [
            (W, 540, 590),
            (B, 590, 600),
            (W, 600, 630),
            (L, 630, 660),
            (W, 660, 710),
            (F, 710, 720),
        ]

    def test_lunch_truncates_break(self):
        """昼休憩にかかる休憩も昼休憩開始で打ち切られる"""
        slots = build_day_grid("09:00", "12:00", 50, 20, Lunch(start="10:00", duration=60))
        assert as_tuples(slots) == [
            (W, 540, 590),
            (B, 590, 600),
            (L, 600, 660),
            (W, 660, 710),
            (F, 710, 720),
        ]

    def test_no_break(self):
        """休憩0分の場合は作業ブロックが連続する"""
        slots = build_day_grid("09:00", "10:45", 25, 0)
        assert [s.block_type for s in slots] == [W, W, W, W, F]
        assert_tiles(slots, "09:00", "10:45")

    def test_window_shorter_than_work_block(self):
        """作業ブロックが入らない時間帯は予備のみ"""
        slots = build_day_grid("09:00", "09:20", 25, 5)
        assert as_tuples(slots) == [(F, 540, 560)]
        assert grid_work_capacity(slots) == 0

    def test_lunch_at_window_start(self):
        """開始時刻ちょうどの昼休憩"""
        slots = build_day_grid("12:00", "14:00", 50, 10, Lunch(start="12:00", duration=60))
        assert as_tuples(slots) == [(L, 720, 780), (W, 780, 830), (F, 830, 840)]

    def test_lunch_covers_whole_window(self):
        """昼休憩が作業時間帯全体を占める"""
        slots = build_day_grid("12:00", "13:00", 30, 10, Lunch(start="12:00", duration=60))
        assert as_tuples(slots) == [(L, 720, 780)]

    @pytest.mark.parametrize("start,end,work,brk,lunch", [
        ("08:00", "18:30", 45, 15, Lunch(start="12:15", duration=45)),
        ("06:10", "22:55", 90, 20, None),
        ("09:00", "17:00", 25, 5, Lunch(start="09:40", duration=35)),
        ("10:00", "10:30", 25, 10, None),
    ])
    def test_coverage(self, start, end, work, brk, lunch):
        """どの設定でも作業時間帯を隙間なく覆う"""
        assert_tiles(build_day_grid(start, end, work, brk, lunch), start, end)

    def test_work_capacity(self):
        """workスロット合計"""
        slots = build_day_grid("09:00", "17:00", 50, 10)
        assert grid_work_capacity(slots) == 400

    def test_grid_slot_str(self):
        """スロットの文字列表現"""
        assert str(GridSlot(W, 540, 590)) == "work 09:00-09:50"


class TestBuildDayGridValidation:
    """build_day_gridの入力検証テスト"""

    @pytest.mark.parametrize("start,end", [("09:00", "09:00"), ("17:00", "09:00")])
    def test_invalid_window(self, start, end):
        with pytest.raises(InvalidWindow):
            build_day_grid(start, end, 50, 10)

    @pytest.mark.parametrize("work,brk", [(24, 10), (50, -1)])
    def test_invalid_rhythm(self, work, brk):
        with pytest.raises(InvalidRhythm):
            build_day_grid("09:00", "17:00", work, brk)

    @pytest.mark.parametrize("lunch", [
        Lunch(start="08:30", duration=60),
        Lunch(start="16:30", duration=60),
        Lunch(start="13:00", duration=0),
    ])
    def test_invalid_lunch(self, lunch):
        with pytest.raises(InvalidLunch):
            build_day_grid("09:00", "17:00", 50, 10, lunch)

    def test_errors_are_settings_errors(self):
        """グリッドの例外はInvalidSettings（ValueError）の一種"""
        with pytest.raises(InvalidSettings):
            build_day_grid("10:00", "09:00", 50, 10)
        with pytest.raises(ValueError):
            build_day_grid("09:00", "17:00", 10, 10)
