"""
スキル学習スケジュール用のデータ構造とクラス定義

このモジュールは、スキル・設定・スケジュールブロック・サマリーなど
割り当てエンジンの入出力となるデータ構造を提供します。
すべての構造は to_dict()/from_dict() でJSONと相互変換できます。
"""

import uuid
from typing import List, Dict, Any, Optional
from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum


class Priority(Enum):
    """スキル優先度の定義"""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        """消化順序（小さいほど先）"""
        return PRIORITY_ORDER.index(self)


PRIORITY_ORDER = [Priority.HIGH, Priority.MEDIUM, Priority.LOW]


class ScheduleMode(Enum):
    """スケジュール生成モード"""
    DAILY = "Daily"      # 1日の学習時間を指定し、全スキル完了まで日を進める
    MONTHLY = "Monthly"  # 開始日〜終了日の期間を固定で生成する


class BlockType(Enum):
    """ブロックタイプの定義"""
    WORK = "work"
    BREAK = "break"
    LUNCH = "lunch"
    BUFFER = "buffer"


@dataclass
class Skill:
    """学習対象スキル"""
    id: str
    name: str
    priority: Priority
    est_hours: float

    @property
    def est_minutes(self) -> int:
        """推定総学習時間（分）"""
        return int(round(self.est_hours * 60))

    @classmethod
    def create(cls, name: str, priority: Priority, est_hours: float) -> "Skill":
        """新しいIDを採番してスキルを作成"""
        return cls(id=str(uuid.uuid4()), name=name.strip(), priority=priority, est_hours=est_hours)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "priority": self.priority.value,
            "estHours": self.est_hours,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Skill":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            priority=Priority(data["priority"]),
            est_hours=float(data["estHours"]),
        )


@dataclass
class Lunch:
    """昼休憩（開始時刻と長さ）"""
    start: str
    duration: int

    def to_dict(self) -> Dict[str, Any]:
        return {"start": self.start, "duration": self.duration}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Lunch":
        return cls(start=str(data["start"]), duration=int(data["duration"]))


@dataclass
class Settings:
    """スケジュール生成設定"""
    mode: ScheduleMode
    start_time: str
    end_time: str
    work_block_mins: int
    break_mins: int
    daily_hours: Optional[float] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    lunch: Optional[Lunch] = None

    @property
    def daily_minutes(self) -> Optional[int]:
        """1日あたりの学習時間（分）"""
        if self.daily_hours is None:
            return None
        return int(round(self.daily_hours * 60))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mode": self.mode.value,
            "dailyHours": self.daily_hours,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "workBlockMins": self.work_block_mins,
            "breakMins": self.break_mins,
            "lunch": self.lunch.to_dict() if self.lunch else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        lunch_data = data.get("lunch")
        daily_hours = data.get("dailyHours")
        return cls(
            mode=ScheduleMode(data["mode"]),
            start_time=str(data["startTime"]),
            end_time=str(data["endTime"]),
            work_block_mins=int(data["workBlockMins"]),
            break_mins=int(data["breakMins"]),
            daily_hours=float(daily_hours) if daily_hours is not None else None,
            start_date=data.get("startDate"),
            end_date=data.get("endDate"),
            lunch=Lunch.from_dict(lunch_data) if lunch_data else None,
        )


@dataclass
class ScheduleBlock:
    """1日の中の時間ブロック"""
    start: str
    end: str
    block_type: BlockType
    minutes: int
    skill_id: Optional[str] = None
    skill_name: Optional[str] = None

    def __post_init__(self):
        """ブロック作成後の検証"""
        if self.minutes <= 0:
            raise ValueError("ブロックの時間は正の値である必要があります")
        if self.block_type != BlockType.WORK and self.skill_id is not None:
            raise ValueError("スキルを持てるのはworkブロックのみです")

    @property
    def label(self) -> str:
        """表示用ラベル（workはスキル名、それ以外はタイプ名）"""
        return self.skill_name or self.block_type.value.capitalize()

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "start": self.start,
            "end": self.end,
            "type": self.block_type.value,
            "minutes": self.minutes,
        }
        if self.skill_id is not None:
            data["skillId"] = self.skill_id
            data["skillName"] = self.skill_name
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScheduleBlock":
        return cls(
            start=str(data["start"]),
            end=str(data["end"]),
            block_type=BlockType(data["type"]),
            minutes=int(data["minutes"]),
            skill_id=data.get("skillId"),
            skill_name=data.get("skillName"),
        )


@dataclass
class ScheduleDay:
    """1日分のスケジュール"""
    date: str
    blocks: List[ScheduleBlock] = field(default_factory=list)

    def work_minutes(self) -> int:
        """この日のwork合計（分）"""
        return sum(b.minutes for b in self.blocks if b.block_type == BlockType.WORK)

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "blocks": [b.to_dict() for b in self.blocks]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScheduleDay":
        return cls(date=str(data["date"]), blocks=[ScheduleBlock.from_dict(b) for b in data["blocks"]])


@dataclass
class ScheduleSummary:
    """スキル別の割り当て集計"""
    skill_id: str
    skill_name: str
    minutes: int
    percent: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "skillId": self.skill_id,
            "skillName": self.skill_name,
            "minutes": self.minutes,
            "percent": self.percent,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScheduleSummary":
        return cls(
            skill_id=str(data["skillId"]),
            skill_name=str(data["skillName"]),
            minutes=int(data["minutes"]),
            percent=float(data["percent"]),
        )


@dataclass
class ScheduleResult:
    """割り当て結果（日別スケジュールとサマリー）"""
    days: List[ScheduleDay] = field(default_factory=list)
    summary: List[ScheduleSummary] = field(default_factory=list)

    def total_work_minutes(self) -> int:
        return sum(day.work_minutes() for day in self.days)

    def unallocated_minutes(self, skills: List[Skill]) -> int:
        """推定時間のうち割り当てられなかった合計（分）"""
        allocated = {s.skill_id: s.minutes for s in self.summary}
        return sum(max(0, skill.est_minutes - allocated.get(skill.id, 0)) for skill in skills)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schedule": [d.to_dict() for d in self.days],
            "summary": [s.to_dict() for s in self.summary],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScheduleResult":
        return cls(
            days=[ScheduleDay.from_dict(d) for d in data.get("schedule", [])],
            summary=[ScheduleSummary.from_dict(s) for s in data.get("summary", [])],
        )


def add_skill(skills: List[Skill], new_skill: Skill) -> List[Skill]:
    """スキルを追加した新しいリストを返す（名前の重複は不可）"""
    from .validation import validate_skill

    validate_skill(new_skill, skills)
    return skills + [new_skill]


def remove_skill(skills: List[Skill], skill_id: str) -> List[Skill]:
    """指定IDのスキルを除いた新しいリストを返す"""
    return [s for s in skills if s.id != skill_id]


def default_settings(today: date, daily_hours: float = 6.0, plan_days: int = 29,
                     start_time: str = "09:00", end_time: str = "17:00",
                     work_block_mins: int = 50, break_mins: int = 10,
                     lunch: Optional[Lunch] = None) -> Settings:
    """デフォルト設定を作成"""
    if lunch is None:
        lunch = Lunch(start="13:00", duration=60)
    return Settings(
        mode=ScheduleMode.DAILY,
        daily_hours=daily_hours,
        start_date=today.strftime("%Y-%m-%d"),
        end_date=(today + timedelta(days=plan_days)).strftime("%Y-%m-%d"),
        start_time=start_time,
        end_time=end_time,
        work_block_mins=work_block_mins,
        break_mins=break_mins,
        lunch=lunch,
    )
