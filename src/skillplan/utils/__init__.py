"""
ユーティリティパッケージ

このパッケージは、アプリケーション全体で使用される共通機能を提供します。
設定管理、ログ機能、表示用データ変換、状態の入出力などのユーティリティが含まれています。
"""

# 設定管理とログ機能
from .config import get_config, reload_config, AppConfig
from .logger import setup_logging, get_logger

from .schedule_converter import (
    format_minutes,
    day_to_dataframe,
    days_to_dataframe,
    summary_to_dataframe,
    daily_skill_matrix,
    dataframe_to_csv
)
from .state_io import AppState, StateLoadError, export_state_json, load_state_json
from .progress_tracker import CompletionOverlay, is_block_past
from .constants import (
    DEFAULT_MAX_SCHEDULE_DAYS,
    MODE_CHOICES,
    PRIORITY_CHOICES,
    BLOCK_TYPE_LABELS,
    BLOCK_TYPE_ICONS
)

__all__ = [
    # 設定管理とログ機能
    'get_config',
    'reload_config',
    'AppConfig',
    'setup_logging',
    'get_logger',

    # スケジュール変換機能
    'format_minutes',
    'day_to_dataframe',
    'days_to_dataframe',
    'summary_to_dataframe',
    'daily_skill_matrix',
    'dataframe_to_csv',

    # 状態の入出力
    'AppState',
    'StateLoadError',
    'export_state_json',
    'load_state_json',

    # 進捗オーバーレイ
    'CompletionOverlay',
    'is_block_past',

    # 定数
    'DEFAULT_MAX_SCHEDULE_DAYS',
    'MODE_CHOICES',
    'PRIORITY_CHOICES',
    'BLOCK_TYPE_LABELS',
    'BLOCK_TYPE_ICONS'
]
