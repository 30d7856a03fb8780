"""
アルゴリズム層

ブロックグリッド生成とスキル割り当てアルゴリズムの実装を提供します。
"""

from .block_grid import GridSlot, build_day_grid, grid_work_capacity
from .day_strategies import (
    DayStrategy,
    DailyDayStrategy,
    MonthlyDayStrategy,
    select_day_strategy
)
from .skill_allocator import SkillAllocator, allocate

__all__ = [
    "GridSlot",
    "build_day_grid",
    "grid_work_capacity",
    "DayStrategy",
    "DailyDayStrategy",
    "MonthlyDayStrategy",
    "select_day_strategy",
    "SkillAllocator",
    "allocate"
]
