"""
モデル層

スキル学習スケジュールのデータ構造・例外・入力検証を提供します。
"""

from .schedule_models import (
    Priority,
    ScheduleMode,
    BlockType,
    Skill,
    Lunch,
    Settings,
    ScheduleBlock,
    ScheduleDay,
    ScheduleSummary,
    ScheduleResult,
    PRIORITY_ORDER,
    add_skill,
    remove_skill,
    default_settings
)
from .errors import (
    SchedulerError,
    InvalidSettings,
    InvalidWindow,
    InvalidRhythm,
    InvalidLunch,
    InvalidSkill,
    NoSkills,
    UnreachableTarget
)
from .validation import (
    parse_hhmm,
    format_hhmm,
    parse_date,
    validate_skill,
    validate_skills,
    validate_settings
)

__all__ = [
    "Priority",
    "ScheduleMode",
    "BlockType",
    "Skill",
    "Lunch",
    "Settings",
    "ScheduleBlock",
    "ScheduleDay",
    "ScheduleSummary",
    "ScheduleResult",
    "PRIORITY_ORDER",
    "add_skill",
    "remove_skill",
    "default_settings",
    "SchedulerError",
    "InvalidSettings",
    "InvalidWindow",
    "InvalidRhythm",
    "InvalidLunch",
    "InvalidSkill",
    "NoSkills",
    "UnreachableTarget",
    "parse_hhmm",
    "format_hhmm",
    "parse_date",
    "validate_skill",
    "validate_skills",
    "validate_settings"
]
