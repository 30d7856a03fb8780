"""
日付生成ストラテジー

Dailyモード（全スキル完了まで日を進める）とMonthlyモード（期間固定）の
日付列と終了条件を同じインターフェースで提供します。
"""

from datetime import date, timedelta
from typing import Iterator, Optional

import pandas as pd

from skillplan.models.errors import InvalidSettings, UnreachableTarget
from skillplan.models.schedule_models import Settings, ScheduleMode
from skillplan.models.validation import parse_date
from skillplan.utils.logger import get_logger

logger = get_logger(__name__)


class DayStrategy:
    """日付生成ストラテジーの基本クラス"""

    def iter_dates(self) -> Iterator[date]:
        """生成対象の日付を昇順に返す"""
        raise NotImplementedError("サブクラスで実装してください")

    def is_finished(self, remaining_minutes: int) -> bool:
        """残り時間に応じて日付生成を打ち切るか"""
        raise NotImplementedError("サブクラスで実装してください")

    def work_budget(self) -> Optional[int]:
        """1日あたりのwork上限（分）。上限なしはNone"""
        return None


class DailyDayStrategy(DayStrategy):
    """
    1日の学習時間を固定し、全スキルが完了するまで日を進める

    毎日 day_capacity（1日の学習時間とworkスロット合計の小さい方）ずつ
    割り当てられるため、生成日数は事前に決まります。
    最後に残った時間が作業ブロック1つ分に満たない場合は、その分のために
    日を追加せず割り当てません（初日は必ず生成します）。
    """

    def __init__(self, start: date, daily_minutes: int, day_capacity: int,
                 total_minutes: int, max_days: int, work_block_minutes: int):
        if day_capacity <= 0:
            raise UnreachableTarget("1日に割り当て可能な作業時間がありません。作業時間帯・作業ブロック長を見直してください")

        self.start = start
        self.daily_minutes = daily_minutes
        self.day_capacity = day_capacity
        self.min_tail_minutes = min(work_block_minutes, day_capacity)

        full_days, tail = divmod(total_minutes, day_capacity)
        if full_days == 0 or tail >= self.min_tail_minutes:
            full_days += 1
        self.required_days = full_days

        if self.required_days > max_days:
            raise UnreachableTarget(
                f"全スキルの完了に{self.required_days}日必要です（上限{max_days}日）。1日の学習時間を増やしてください"
            )
        logger.debug(f"Dailyモード: 1日{day_capacity}分 × {self.required_days}日")

    def iter_dates(self) -> Iterator[date]:
        for offset in range(self.required_days):
            yield self.start + timedelta(days=offset)

    def is_finished(self, remaining_minutes: int) -> bool:
        return remaining_minutes <= 0

    def work_budget(self) -> Optional[int]:
        return self.daily_minutes


class MonthlyDayStrategy(DayStrategy):
    """開始日〜終了日（両端含む）の全日付を生成する"""

    def __init__(self, start: date, end: date):
        if end < start:
            raise InvalidSettings(f"終了日は開始日以降である必要があります: {start} - {end}")
        self.start = start
        self.end = end

    def iter_dates(self) -> Iterator[date]:
        for ts in pd.date_range(self.start, self.end, freq="D"):
            yield ts.date()

    def is_finished(self, remaining_minutes: int) -> bool:
        # 期間内は残り時間に関係なく全日生成する
        return False


def select_day_strategy(settings: Settings, today: date, day_template_capacity: int,
                        total_minutes: int, max_days: int) -> DayStrategy:
    """
    設定のモードに応じたストラテジーを選択

    Args:
        settings: スケジュール設定
        today: Dailyモードの開始日
        day_template_capacity: テンプレート1日分のworkスロット合計（分）
        total_minutes: 全スキルの推定時間合計（分）
        max_days: Dailyモードで生成する最大日数

    Returns:
        DayStrategyインスタンス
    """
    if settings.mode == ScheduleMode.DAILY:
        daily_minutes = settings.daily_minutes
        capacity = min(daily_minutes, day_template_capacity)
        return DailyDayStrategy(today, daily_minutes, capacity, total_minutes, max_days,
                                settings.work_block_mins)

    return MonthlyDayStrategy(parse_date(settings.start_date), parse_date(settings.end_date))
