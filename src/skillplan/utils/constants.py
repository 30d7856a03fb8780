"""
定数定義モジュール

スキル学習スケジューラーで使用する定数を定義します。
"""

# 割り当てエンジン
DEFAULT_MAX_SCHEDULE_DAYS = 3660  # Dailyモードで生成する最大日数（約10年）
MIN_WORK_BLOCK_MINS = 25
MIN_DAILY_HOURS = 0.1  # 設定フォームの1日の学習時間の下限

# 選択肢
MODE_CHOICES = ["Daily", "Monthly"]
PRIORITY_CHOICES = ["High", "Medium", "Low"]

# ブロック表示
BLOCK_TYPE_LABELS = {
    "work": "学習",
    "break": "休憩",
    "lunch": "昼休憩",
    "buffer": "予備",
}
BLOCK_TYPE_ICONS = {
    "work": "💼",
    "break": "☕",
    "lunch": "🍽️",
    "buffer": "🕒",
}

# 出力
TIMETABLE_COLUMNS = ["date", "start", "end", "type", "activity", "minutes", "skill_id"]
SUMMARY_COLUMNS = ["skill_id", "skill", "minutes", "total_time", "percent"]
