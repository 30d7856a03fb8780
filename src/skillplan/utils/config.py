"""
設定管理モジュール

このモジュールは、アプリケーション全体で使用される設定値を管理します。
環境変数から値を読み込み、適切なデフォルト値を提供します。
direnvとの連携を考慮し、開発環境での設定管理を簡素化します。

主な機能:
- 環境変数からの設定値読み込み
- デフォルト値の提供
- 設定値の型変換
- 設定値の検証
"""

import os
import logging
from typing import Optional
from dataclasses import dataclass
from pathlib import Path


@dataclass
class AppConfig:
    """アプリケーション設定クラス"""

    # アプリケーション基本設定
    app_name: str
    app_version: str
    debug: bool
    log_level: str

    # Streamlit設定
    streamlit_server_port: int
    streamlit_server_address: str

    # 割り当てエンジン設定
    max_schedule_days: int

    # スケジュールのデフォルト値
    default_daily_hours: float
    default_plan_days: int
    default_start_time: str
    default_end_time: str
    default_work_block_mins: int
    default_break_mins: int
    default_lunch_start: str
    default_lunch_duration: int

    # ログ設定
    log_file: Path
    log_max_size: str
    log_backup_count: int


class ConfigManager:
    """設定管理クラス"""

    def __init__(self):
        """設定マネージャーを初期化"""
        self._config: Optional[AppConfig] = None
        self._logger = logging.getLogger(__name__)

    def load_config(self) -> AppConfig:
        """環境変数から設定を読み込み、AppConfigオブジェクトを返す"""
        if self._config is None:
            self._config = self._create_config()
        return self._config

    def _create_config(self) -> AppConfig:
        """環境変数から設定オブジェクトを作成"""

        # アプリケーション基本設定
        app_name = os.getenv('APP_NAME', 'SkillPlan')
        app_version = os.getenv('APP_VERSION', '0.1.0')
        debug = self._parse_bool(os.getenv('DEBUG', 'false'))
        log_level = os.getenv('LOG_LEVEL', 'INFO')

        # Streamlit設定
        streamlit_server_port = int(os.getenv('STREAMLIT_SERVER_PORT', '8501'))
        streamlit_server_address = os.getenv('STREAMLIT_SERVER_ADDRESS', '0.0.0.0')

        # 割り当てエンジン設定
        max_schedule_days = int(os.getenv('MAX_SCHEDULE_DAYS', '3660'))

        # スケジュールのデフォルト値
        default_daily_hours = float(os.getenv('DEFAULT_DAILY_HOURS', '6'))
        default_plan_days = int(os.getenv('DEFAULT_PLAN_DAYS', '29'))
        default_start_time = os.getenv('DEFAULT_START_TIME', '09:00')
        default_end_time = os.getenv('DEFAULT_END_TIME', '17:00')
        default_work_block_mins = int(os.getenv('DEFAULT_WORK_BLOCK_MINS', '50'))
        default_break_mins = int(os.getenv('DEFAULT_BREAK_MINS', '10'))
        default_lunch_start = os.getenv('DEFAULT_LUNCH_START', '13:00')
        default_lunch_duration = int(os.getenv('DEFAULT_LUNCH_DURATION', '60'))

        # ログ設定
        log_file = Path(os.getenv('LOG_FILE', './logs/app.log'))
        log_max_size = os.getenv('LOG_MAX_SIZE', '10MB')
        log_backup_count = int(os.getenv('LOG_BACKUP_COUNT', '5'))

        # 設定オブジェクトを作成
        config = AppConfig(
            app_name=app_name,
            app_version=app_version,
            debug=debug,
            log_level=log_level,
            streamlit_server_port=streamlit_server_port,
            streamlit_server_address=streamlit_server_address,
            max_schedule_days=max_schedule_days,
            default_daily_hours=default_daily_hours,
            default_plan_days=default_plan_days,
            default_start_time=default_start_time,
            default_end_time=default_end_time,
            default_work_block_mins=default_work_block_mins,
            default_break_mins=default_break_mins,
            default_lunch_start=default_lunch_start,
            default_lunch_duration=default_lunch_duration,
            log_file=log_file,
            log_max_size=log_max_size,
            log_backup_count=log_backup_count
        )

        # 設定の検証
        self._validate_config(config)

        # ログ出力
        self._log_config_summary(config)

        return config

    def _parse_bool(self, value: str) -> bool:
        """文字列をブール値に変換"""
        return value.lower() in ('true', '1', 'yes', 'on')

    def _validate_config(self, config: AppConfig) -> None:
        """設定値の検証"""
        errors = []

        if config.max_schedule_days <= 0:
            errors.append("MAX_SCHEDULE_DAYSは正の値である必要があります")

        if config.default_daily_hours <= 0:
            errors.append("DEFAULT_DAILY_HOURSは正の値である必要があります")

        if config.default_plan_days < 0:
            errors.append("DEFAULT_PLAN_DAYSは0以上の値である必要があります")

        if config.default_work_block_mins < 25:
            errors.append("DEFAULT_WORK_BLOCK_MINSは25以上の値である必要があります")

        if config.default_break_mins < 0:
            errors.append("DEFAULT_BREAK_MINSは0以上の値である必要があります")

        if config.default_lunch_duration <= 0:
            errors.append("DEFAULT_LUNCH_DURATIONは正の値である必要があります")

        if config.log_backup_count < 0:
            errors.append("LOG_BACKUP_COUNTは0以上の値である必要があります")

        # エラーがあれば例外を発生
        if errors:
            error_msg = "設定エラー:\n" + "\n".join(f"- {error}" for error in errors)
            raise ValueError(error_msg)

    def _log_config_summary(self, config: AppConfig) -> None:
        """設定の要約をログに出力"""
        self._logger.info("アプリケーション設定を読み込みました:")
        self._logger.info(f"  アプリ名: {config.app_name} v{config.app_version}")
        self._logger.info(f"  デバッグモード: {config.debug}")
        self._logger.info(f"  ログレベル: {config.log_level}")
        self._logger.info(f"  最大生成日数: {config.max_schedule_days}")
        self._logger.info(f"  Streamlit: {config.streamlit_server_address}:{config.streamlit_server_port}")
        self._logger.info(f"  ログファイル: {config.log_file}")


# グローバル設定インスタンス
config_manager = ConfigManager()


def get_config() -> AppConfig:
    """設定オブジェクトを取得"""
    return config_manager.load_config()


def reload_config() -> AppConfig:
    """設定を再読み込み"""
    config_manager._config = None
    return config_manager.load_config()
