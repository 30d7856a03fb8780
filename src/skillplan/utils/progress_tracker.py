"""
進捗オーバーレイモジュール

生成済みスケジュールに対する完了チェックと経過判定を扱います。
スケジュール本体は変更せず、(日付, ブロック番号) をキーとした別構造で保持します。
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Set, Tuple

from skillplan.models.schedule_models import BlockType, ScheduleBlock, ScheduleResult

BlockKey = Tuple[str, int]


@dataclass
class CompletionOverlay:
    """workブロックの完了フラグ"""
    completed: Set[BlockKey] = field(default_factory=set)

    def toggle(self, day_date: str, index: int) -> bool:
        """完了フラグを反転し、反転後の状態を返す"""
        key = (day_date, index)
        if key in self.completed:
            self.completed.discard(key)
            return False
        self.completed.add(key)
        return True

    def is_completed(self, day_date: str, index: int) -> bool:
        return (day_date, index) in self.completed

    def completed_minutes(self, result: ScheduleResult) -> Dict[str, int]:
        """スキル別の完了済み時間（分）"""
        minutes: Dict[str, int] = {}
        for day in result.days:
            for index, block in enumerate(day.blocks):
                if block.block_type == BlockType.WORK and self.is_completed(day.date, index):
                    minutes[block.skill_id] = minutes.get(block.skill_id, 0) + block.minutes
        return minutes

    def prune(self, result: ScheduleResult) -> None:
        """スケジュールに存在しないキーを削除"""
        valid = {
            (day.date, index)
            for day in result.days
            for index, block in enumerate(day.blocks)
            if block.block_type == BlockType.WORK
        }
        self.completed &= valid

    def to_dict(self) -> Dict[str, List[int]]:
        data: Dict[str, List[int]] = {}
        for day_date, index in sorted(self.completed):
            data.setdefault(day_date, []).append(index)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, List[int]]) -> "CompletionOverlay":
        return cls(completed={(day_date, int(i)) for day_date, indices in data.items() for i in indices})


def is_block_past(day_date: str, block: ScheduleBlock, now: datetime) -> bool:
    """ブロックの終了時刻が現在時刻を過ぎているか"""
    block_end = datetime.strptime(f"{day_date} {block.end}", "%Y-%m-%d %H:%M")
    return block_end <= now
