#!/usr/bin/env python3
"""
入力検証のユニットテスト
"""

import sys
import os
import pytest

# プロジェクトルートをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from skillplan.models import (
    Skill, Settings, Lunch, Priority, ScheduleMode, InvalidSettings, InvalidSkill,
    parse_hhmm, format_hhmm, parse_date, validate_skill, validate_skills, validate_settings
)


def make_settings(**kwargs):
    values = dict(mode=ScheduleMode.DAILY, start_time="09:00", end_time="17:00",
                  work_block_mins=50, break_mins=10, daily_hours=4.0)
    values.update(kwargs)
    return Settings(**values)


class TestTimeHelpers:
    """時刻・日付変換のテスト"""

    def test_parse_and_format(self):
        assert parse_hhmm("00:00") == 0
        assert parse_hhmm("09:05") == 545
        assert parse_hhmm("23:59") == 1439
        assert format_hhmm(545) == "09:05"
        assert format_hhmm(1439) == "23:59"

    @pytest.mark.parametrize("value", ["9:00", "24:00", "12:60", "noon", ""])
    def test_invalid_time(self, value):
        with pytest.raises(InvalidSettings):
            parse_hhmm(value)

    def test_parse_date(self):
        assert parse_date("2026-02-28").isoformat() == "2026-02-28"
        with pytest.raises(InvalidSettings):
            parse_date("2026-02-30")
        with pytest.raises(InvalidSettings):
            parse_date(None)


class TestValidateSkill:
    """スキル検証のテスト"""

    def test_valid(self):
        validate_skills([Skill("a", "Python", Priority.HIGH, 1), Skill("b", "Go", Priority.LOW, 0.1)])

    def test_blank_name(self):
        with pytest.raises(InvalidSkill):
            validate_skill(Skill("a", "   ", Priority.HIGH, 1), [])

    @pytest.mark.parametrize("hours", [0, -1, 0.05])
    def test_non_positive_hours(self, hours):
        with pytest.raises(InvalidSkill):
            validate_skill(Skill("a", "Python", Priority.HIGH, hours), [])

    def test_duplicate_id(self):
        with pytest.raises(InvalidSkill):
            validate_skills([Skill("a", "Python", Priority.HIGH, 1), Skill("a", "Go", Priority.HIGH, 1)])


class TestValidateSettings:
    """設定検証のテスト"""

    def test_valid_daily(self):
        validate_settings(make_settings())

    def test_valid_monthly(self):
        validate_settings(make_settings(mode=ScheduleMode.MONTHLY, daily_hours=None,
                                        start_date="2026-01-01", end_date="2026-01-01"))

    @pytest.mark.parametrize("daily_hours", [None, 0, -2, 0.001])
    def test_daily_requires_hours(self, daily_hours):
        with pytest.raises(InvalidSettings):
            validate_settings(make_settings(daily_hours=daily_hours))

    def test_monthly_requires_dates(self):
        with pytest.raises(InvalidSettings):
            validate_settings(make_settings(mode=ScheduleMode.MONTHLY, start_date="2026-01-01"))

    def test_monthly_inverted_dates(self):
        with pytest.raises(InvalidSettings):
            validate_settings(make_settings(mode=ScheduleMode.MONTHLY,
                                            start_date="2026-01-02", end_date="2026-01-01"))

    def test_monthly_bad_date_format(self):
        with pytest.raises(InvalidSettings):
            validate_settings(make_settings(mode=ScheduleMode.MONTHLY,
                                            start_date="01/01/2026", end_date="2026-01-02"))

    def test_bad_time_format(self):
        with pytest.raises(InvalidSettings):
            validate_settings(make_settings(start_time="9am"))

    def test_bad_lunch_format(self):
        with pytest.raises(InvalidSettings):
            validate_settings(make_settings(lunch=Lunch(start="1pm", duration=60)))

    def test_all_errors_reported(self):
        """複数の問題をまとめて通知"""
        with pytest.raises(InvalidSettings) as excinfo:
            validate_settings(make_settings(start_time="x", end_time="y", daily_hours=None))
        message = str(excinfo.value)
        assert "開始時刻" in message
        assert "終了時刻" in message
        assert "Daily" in message
