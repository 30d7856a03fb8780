"""
スキル割り当てアルゴリズム

1日分のブロックグリッドのworkスロットに、優先度順（High → Medium → Low、
同一優先度内は入力順）でスキルの学習時間を詰めていきます。
入力が同じなら常に同じ結果を返す純粋な処理です。
"""

from datetime import date
from typing import List, Dict, Optional

from skillplan.models.errors import NoSkills
from skillplan.models.schedule_models import (
    Skill, Settings, BlockType,
    ScheduleBlock, ScheduleDay, ScheduleSummary, ScheduleResult
)
from skillplan.models.validation import validate_skills, validate_settings, format_hhmm
from skillplan.utils.constants import DEFAULT_MAX_SCHEDULE_DAYS
from skillplan.utils.logger import get_logger

from .block_grid import build_day_grid, grid_work_capacity
from .day_strategies import select_day_strategy

logger = get_logger(__name__)


class SkillAllocator:
    """スキル割り当てアルゴリズム"""

    def __init__(self, skills: List[Skill], settings: Settings):
        if not skills:
            raise NoSkills("スキルが登録されていません。少なくとも1つ追加してください")

        validate_skills(skills)
        validate_settings(settings)

        self.settings = settings
        # 優先度で安定ソート（同一優先度内は入力順を維持）
        self.skills = sorted(skills, key=lambda s: s.priority.rank)
        self.template = build_day_grid(
            settings.start_time, settings.end_time,
            settings.work_block_mins, settings.break_mins, settings.lunch
        )

    def allocate(self, today: Optional[date] = None,
                 max_days: int = DEFAULT_MAX_SCHEDULE_DAYS) -> ScheduleResult:
        """
        全日分の割り当てを実行

        Args:
            today: Dailyモードの開始日（Noneの場合は当日）
            max_days: Dailyモードで生成する最大日数

        Returns:
            日別スケジュールとサマリー
        """
        if today is None:
            today = date.today()

        # 残り時間はこの呼び出しの中だけで保持する
        remaining: Dict[str, int] = {s.id: s.est_minutes for s in self.skills}
        total_minutes = sum(remaining.values())

        strategy = select_day_strategy(
            self.settings, today, grid_work_capacity(self.template), total_minutes, max_days
        )
        budget = strategy.work_budget()

        days: List[ScheduleDay] = []
        for current in strategy.iter_dates():
            if strategy.is_finished(sum(remaining.values())):
                break
            blocks = self._fill_day(remaining, budget)
            days.append(ScheduleDay(date=current.strftime("%Y-%m-%d"), blocks=blocks))

        result = ScheduleResult(days=days, summary=self._summarize(days))
        left = result.unallocated_minutes(self.skills)
        if left > 0:
            logger.info(f"{self.settings.mode.value}モード: 割り当てられなかった時間 {left}分 ({len(days)}日)")

        logger.debug(f"割り当て完了 - 日数: {len(days)}, スキル数: {len(result.summary)}")
        return result

    def _next_active(self, remaining: Dict[str, int]) -> Optional[Skill]:
        """残り時間のある最優先スキル"""
        for skill in self.skills:
            if remaining[skill.id] > 0:
                return skill
        return None

    def _fill_day(self, remaining: Dict[str, int], budget: Optional[int]) -> List[ScheduleBlock]:
        """テンプレートのworkスロットにスキルを詰めて1日分のブロックを作成"""
        blocks: List[ScheduleBlock] = []
        budget_left = budget

        for slot in self.template:
            if slot.block_type != BlockType.WORK:
                blocks.append(_make_block(slot.block_type, slot.start, slot.end))
                continue

            capacity = slot.minutes if budget_left is None else min(slot.minutes, budget_left)
            cursor = slot.start
            assignable_end = slot.start + capacity

            while cursor < assignable_end:
                skill = self._next_active(remaining)
                if skill is None:
                    break
                take = min(remaining[skill.id], assignable_end - cursor)
                blocks.append(_make_block(BlockType.WORK, cursor, cursor + take, skill))
                remaining[skill.id] -= take
                cursor += take

            if budget_left is not None:
                budget_left -= cursor - slot.start

            if cursor < slot.end:
                blocks.append(_make_block(BlockType.BUFFER, cursor, slot.end))

        return _normalize_idle(blocks)

    def _summarize(self, days: List[ScheduleDay]) -> List[ScheduleSummary]:
        """スキル別の合計時間と割合を集計"""
        minutes_by_skill: Dict[str, int] = {}
        for day in days:
            for block in day.blocks:
                if block.block_type == BlockType.WORK:
                    minutes_by_skill[block.skill_id] = minutes_by_skill.get(block.skill_id, 0) + block.minutes

        total = sum(minutes_by_skill.values())
        if total == 0:
            return []

        summary = []
        for skill in self.skills:
            minutes = minutes_by_skill.get(skill.id, 0)
            if minutes > 0:
                summary.append(ScheduleSummary(
                    skill_id=skill.id,
                    skill_name=skill.name,
                    minutes=minutes,
                    percent=minutes / total * 100
                ))
        return summary


def _make_block(block_type: BlockType, start: int, end: int, skill: Optional[Skill] = None) -> ScheduleBlock:
    return ScheduleBlock(
        start=format_hhmm(start),
        end=format_hhmm(end),
        block_type=block_type,
        minutes=end - start,
        skill_id=skill.id if skill else None,
        skill_name=skill.name if skill else None,
    )


def _normalize_idle(blocks: List[ScheduleBlock]) -> List[ScheduleBlock]:
    """workの後に続かない休憩を予備に変え、連続する予備ブロックを結合"""
    normalized: List[ScheduleBlock] = []
    for block in blocks:
        if block.block_type == BlockType.BREAK and (
            not normalized or normalized[-1].block_type != BlockType.WORK
        ):
            block = ScheduleBlock(block.start, block.end, BlockType.BUFFER, block.minutes)

        if block.block_type == BlockType.BUFFER and normalized and normalized[-1].block_type == BlockType.BUFFER:
            prev = normalized.pop()
            block = ScheduleBlock(prev.start, block.end, BlockType.BUFFER, prev.minutes + block.minutes)

        normalized.append(block)
    return normalized


def allocate(skills: List[Skill], settings: Settings, today: Optional[date] = None,
             max_days: int = DEFAULT_MAX_SCHEDULE_DAYS) -> ScheduleResult:
    """スキル一覧と設定からスケジュールを生成"""
    return SkillAllocator(skills, settings).allocate(today=today, max_days=max_days)

