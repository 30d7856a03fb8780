"""
1日分のブロックグリッド生成

作業時間帯を作業・休憩・昼休憩・予備のスロットで隙間なく敷き詰めます。
スキルの割り当ては行わず、割り当てアルゴリズムが使うテンプレートのみを返します。
"""

from dataclasses import dataclass
from typing import List, Optional

from skillplan.models.errors import InvalidWindow, InvalidRhythm, InvalidLunch
from skillplan.models.schedule_models import BlockType, Lunch
from skillplan.models.validation import parse_hhmm, format_hhmm
from skillplan.utils.constants import MIN_WORK_BLOCK_MINS


@dataclass(frozen=True)
class GridSlot:
    """テンプレートのスロット（0時からの経過分）"""
    block_type: BlockType
    start: int
    end: int

    @property
    def minutes(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"{self.block_type.value} {format_hhmm(self.start)}-{format_hhmm(self.end)}"


def build_day_grid(start_time: str, end_time: str, work_block_minutes: int,
                   break_minutes: int, lunch: Optional[Lunch] = None) -> List[GridSlot]:
    """
    作業時間帯を敷き詰めたスロット列を生成

    先頭から作業ブロックと休憩を交互に置き、残り時間が作業ブロック1つ分に
    満たなくなったら残りを予備ブロックにします。昼休憩の開始時刻に達した
    ブロックはそこで打ち切られ、失われた時間は繰り越しません。

    Args:
        start_time: 開始時刻 (HH:MM)
        end_time: 終了時刻 (HH:MM)
        work_block_minutes: 作業ブロック長（分、25以上）
        break_minutes: 休憩時間（分、0以上）
        lunch: 昼休憩（なしの場合はNone）

    Returns:
        時刻順に並んだGridSlotのリスト
    """
    window_start = parse_hhmm(start_time)
    window_end = parse_hhmm(end_time)

    if window_end <= window_start:
        raise InvalidWindow(f"終了時刻は開始時刻より後である必要があります: {start_time}-{end_time}")

    if work_block_minutes < MIN_WORK_BLOCK_MINS:
        raise InvalidRhythm(f"作業ブロックは{MIN_WORK_BLOCK_MINS}分以上である必要があります: {work_block_minutes}")
    if break_minutes < 0:
        raise InvalidRhythm(f"休憩時間は0分以上である必要があります: {break_minutes}")

    lunch_start = lunch_end = None
    if lunch is not None:
        if lunch.duration <= 0:
            raise InvalidLunch(f"昼休憩の長さは正の値である必要があります: {lunch.duration}")
        lunch_start = parse_hhmm(lunch.start)
        lunch_end = lunch_start + lunch.duration
        if lunch_start < window_start or lunch_end > window_end:
            raise InvalidLunch(
                f"昼休憩 {lunch.start} ({lunch.duration}分) が作業時間帯 {start_time}-{end_time} に収まりません"
            )

    slots: List[GridSlot] = []
    cursor = window_start
    break_due = False

    while cursor < window_end:
        if lunch_start is not None and cursor == lunch_start:
            slots.append(GridSlot(BlockType.LUNCH, lunch_start, lunch_end))
            cursor = lunch_end
            break_due = False
            continue

        # 昼休憩より前にいる間は昼休憩開始がブロックの上限
        limit = lunch_start if lunch_start is not None and cursor < lunch_start else window_end

        if break_due and break_minutes > 0:
            break_end = min(cursor + break_minutes, limit)
            slots.append(GridSlot(BlockType.BREAK, cursor, break_end))
            cursor = break_end
            break_due = False
            continue
        break_due = False

        if window_end - cursor < work_block_minutes:
            slots.append(GridSlot(BlockType.BUFFER, cursor, limit))
            cursor = limit
            continue

        work_end = min(cursor + work_block_minutes, limit)
        slots.append(GridSlot(BlockType.WORK, cursor, work_end))
        cursor = work_end
        # 休憩は次の作業ブロックが収まる場合のみ
        break_due = window_end - cursor >= work_block_minutes

    return slots


def grid_work_capacity(slots: List[GridSlot]) -> int:
    """テンプレート中のworkスロット合計（分）"""
    return sum(s.minutes for s in slots if s.block_type == BlockType.WORK)
