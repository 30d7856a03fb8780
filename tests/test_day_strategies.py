#!/usr/bin/env python3
"""
日付生成ストラテジーのユニットテスト
"""

import sys
import os
from datetime import date
import pytest

# プロジェクトルートをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from skillplan.algorithms.day_strategies import (
    DailyDayStrategy, MonthlyDayStrategy, select_day_strategy
)
from skillplan.models import Settings, ScheduleMode, InvalidSettings, UnreachableTarget


class TestMonthlyDayStrategy:
    """MonthlyDayStrategyのテスト"""

    def test_inclusive_range_across_months(self):
        """月をまたぐ期間を両端含めて生成"""
        strategy = MonthlyDayStrategy(date(2024, 2, 27), date(2024, 3, 1))
        assert list(strategy.iter_dates()) == [
            date(2024, 2, 27), date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)
        ]

    def test_single_day(self):
        strategy = MonthlyDayStrategy(date(2026, 1, 1), date(2026, 1, 1))
        assert list(strategy.iter_dates()) == [date(2026, 1, 1)]

    def test_never_finishes_early(self):
        """期間内は残り時間が0でも打ち切らない"""
        strategy = MonthlyDayStrategy(date(2026, 1, 1), date(2026, 1, 3))
        assert not strategy.is_finished(0)
        assert strategy.work_budget() is None

    def test_inverted_range(self):
        with pytest.raises(InvalidSettings):
            MonthlyDayStrategy(date(2026, 1, 2), date(2026, 1, 1))


class TestDailyDayStrategy:
    """DailyDayStrategyのテスト"""

    def test_required_days_from_day_capacity(self):
        """必要日数は1日の割り当て可能時間から決まる"""
        strategy = DailyDayStrategy(date(2026, 12, 30), daily_minutes=120, day_capacity=100,
                                    total_minutes=250, max_days=10, work_block_minutes=50)
        assert strategy.required_days == 3
        assert list(strategy.iter_dates()) == [date(2026, 12, 30), date(2026, 12, 31), date(2027, 1, 1)]
        assert strategy.work_budget() == 120

    @pytest.mark.parametrize("daily,capacity,total,expected", [
        (360, 150, 360, 3),   # 150 + 150 + 60
        (360, 350, 720, 2),   # 端数20分は作業ブロック未満
        (360, 350, 750, 3),   # 端数50分は1ブロック分
        (120, 120, 30, 1),    # 初日は必ず生成
        (30, 30, 100, 3),     # 1日の割り当て可能時間が作業ブロックより短い
    ])
    def test_window_shorter_than_budget(self, daily, capacity, total, expected):
        """workスロットが予算より少ない場合も作業ブロック1つ分以上の残りには日を追加"""
        strategy = DailyDayStrategy(date(2026, 1, 1), daily, capacity, total, 100, 50)
        assert strategy.required_days == expected

    def test_finishes_when_exhausted(self):
        strategy = DailyDayStrategy(date(2026, 1, 1), 60, 60, 60, 10, 50)
        assert strategy.is_finished(0)
        assert not strategy.is_finished(1)

    def test_zero_capacity(self):
        with pytest.raises(UnreachableTarget):
            DailyDayStrategy(date(2026, 1, 1), 60, 0, 60, 10, 50)

    def test_max_days_bound(self):
        with pytest.raises(UnreachableTarget):
            DailyDayStrategy(date(2026, 1, 1), 30, 30, 30 * 11, 10, 50)


class TestSelectDayStrategy:
    """select_day_strategyのテスト"""

    def base_settings(self, **kwargs):
        values = dict(mode=ScheduleMode.DAILY, start_time="09:00", end_time="17:00",
                      work_block_mins=50, break_mins=10, daily_hours=2.0)
        values.update(kwargs)
        return Settings(**values)

    def test_daily(self):
        strategy = select_day_strategy(self.base_settings(), date(2026, 1, 1), 400, 600, 100)
        assert isinstance(strategy, DailyDayStrategy)
        assert strategy.day_capacity == 120
        assert strategy.required_days == 5

    def test_daily_capacity_limited_by_template(self):
        """テンプレートのworkスロットが予算より少ない場合"""
        strategy = select_day_strategy(self.base_settings(daily_hours=8.0), date(2026, 1, 1), 400, 600, 100)
        assert strategy.day_capacity == 400
        assert strategy.required_days == 2

    def test_monthly(self):
        settings = self.base_settings(mode=ScheduleMode.MONTHLY, start_date="2026-01-01", end_date="2026-01-31")
        strategy = select_day_strategy(settings, date(2020, 1, 1), 400, 600, 100)
        assert isinstance(strategy, MonthlyDayStrategy)
        assert len(list(strategy.iter_dates())) == 31
