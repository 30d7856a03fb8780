"""
入力検証モジュール

スキルとスケジュール設定の入力値を検証します。
フォーム入力層から呼ばれることを想定し、問題点をまとめて例外で通知します。
"""

import re
from datetime import date, datetime
from typing import List, Optional

from .errors import InvalidSettings, InvalidSkill
from .schedule_models import Settings, Skill, ScheduleMode

HHMM_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")

MIN_EST_HOURS = 0.1


def parse_hhmm(value: str) -> int:
    """HH:MM形式の時刻を0時からの経過分に変換"""
    match = HHMM_PATTERN.match(str(value))
    if not match:
        raise InvalidSettings(f"時刻の形式が不正です (HH:MM): {value}")
    return int(match.group(1)) * 60 + int(match.group(2))


def format_hhmm(minutes: int) -> str:
    """0時からの経過分をHH:MM形式に変換"""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def parse_date(value: Optional[str]) -> date:
    """YYYY-MM-DD形式の日付を変換"""
    try:
        return datetime.strptime(str(value), "%Y-%m-%d").date()
    except ValueError:
        raise InvalidSettings(f"日付の形式が不正です (YYYY-MM-DD): {value}")


def validate_skill(skill: Skill, existing: List[Skill]) -> None:
    """
    スキル1件を検証

    Args:
        skill: 検証対象のスキル
        existing: 既に登録済みのスキル（名前重複チェック用）
    """
    if not skill.name or not skill.name.strip():
        raise InvalidSkill("スキル名は必須です")

    if skill.est_hours < MIN_EST_HOURS or skill.est_minutes <= 0:
        raise InvalidSkill(f"スキル {skill.name}: 推定時間は正の値である必要があります")

    name_key = skill.name.strip().lower()
    for other in existing:
        if other.name.strip().lower() == name_key:
            raise InvalidSkill(f"同名のスキルが既に存在します: {skill.name}")


def validate_skills(skills: List[Skill]) -> None:
    """スキル一覧を検証（ID・名前の重複を含む）"""
    seen_ids = set()
    for i, skill in enumerate(skills):
        if skill.id in seen_ids:
            raise InvalidSkill(f"スキルIDが重複しています: {skill.id}")
        seen_ids.add(skill.id)
        validate_skill(skill, skills[:i])


def validate_settings(settings: Settings) -> None:
    """
    設定値の検証

    時刻・日付の形式とモード別の必須項目をチェックします。
    作業時間帯・作業リズム・昼休憩の範囲はブロック生成時に検証されます。
    """
    errors = []

    for label, value in (("開始時刻", settings.start_time), ("終了時刻", settings.end_time)):
        if not HHMM_PATTERN.match(str(value)):
            errors.append(f"{label}の形式が不正です (HH:MM): {value}")

    if settings.mode == ScheduleMode.DAILY:
        if settings.daily_hours is None or settings.daily_hours <= 0 or settings.daily_minutes <= 0:
            errors.append("Dailyモードでは1日の学習時間（正の値）が必須です")

    if settings.mode == ScheduleMode.MONTHLY:
        if not settings.start_date or not settings.end_date:
            errors.append("Monthlyモードでは開始日と終了日が必須です")
        else:
            try:
                if parse_date(settings.start_date) > parse_date(settings.end_date):
                    errors.append("終了日は開始日以降である必要があります")
            except InvalidSettings as e:
                errors.append(str(e))

    if settings.lunch is not None and not HHMM_PATTERN.match(str(settings.lunch.start)):
        errors.append(f"昼休憩開始時刻の形式が不正です (HH:MM): {settings.lunch.start}")

    if errors:
        error_msg = "設定エラー:\n" + "\n".join(f"- {error}" for error in errors)
        raise InvalidSettings(error_msg)
