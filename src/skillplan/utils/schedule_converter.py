"""
スケジュール変換モジュール

割り当て結果を表示・CSV出力用のDataFrameに変換する機能を提供します。
"""

import pandas as pd
from io import StringIO
from typing import List

from skillplan.models.schedule_models import ScheduleDay, ScheduleSummary

from .constants import TIMETABLE_COLUMNS, SUMMARY_COLUMNS, BLOCK_TYPE_LABELS


def format_minutes(minutes: int) -> str:
    """分を「Xh Ym」形式に変換"""
    return f"{minutes // 60}h {minutes % 60}m"


def day_to_dataframe(day: ScheduleDay) -> pd.DataFrame:
    """
    1日分のスケジュールをDataFrameに変換

    Args:
        day: 1日分のスケジュール

    Returns:
        ブロックを行とする時間割DataFrame
    """
    rows = []
    for block in day.blocks:
        block_type = block.block_type.value
        rows.append({
            "date": day.date,
            "start": block.start,
            "end": block.end,
            "type": block_type,
            "activity": block.skill_name or BLOCK_TYPE_LABELS.get(block_type, block_type),
            "minutes": block.minutes,
            "skill_id": block.skill_id or "",
        })
    return pd.DataFrame(rows, columns=TIMETABLE_COLUMNS)


def days_to_dataframe(days: List[ScheduleDay]) -> pd.DataFrame:
    """全日分のスケジュールを1つのDataFrameに結合"""
    if not days:
        return pd.DataFrame(columns=TIMETABLE_COLUMNS)
    return pd.concat([day_to_dataframe(day) for day in days], ignore_index=True)


def summary_to_dataframe(summary: List[ScheduleSummary]) -> pd.DataFrame:
    """サマリーをDataFrameに変換（割合は小数第1位に丸める）"""
    rows = [{
        "skill_id": item.skill_id,
        "skill": item.skill_name,
        "minutes": item.minutes,
        "total_time": format_minutes(item.minutes),
        "percent": round(item.percent, 1),
    } for item in summary]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def daily_skill_matrix(days: List[ScheduleDay]) -> pd.DataFrame:
    """
    日付×スキルの学習時間（分）のピボット表を作成

    Returns:
        日付を行、スキル名を列とするDataFrame（workブロックがない場合は空）
    """
    df = days_to_dataframe(days)
    work = df[df["type"] == "work"]
    if work.empty:
        return pd.DataFrame()
    return work.pivot_table(index="date", columns="activity", values="minutes",
                            aggfunc="sum", fill_value=0)


def dataframe_to_csv(df: pd.DataFrame) -> str:
    """DataFrameをCSV文字列に変換"""
    buf = StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue()
