"""
状態エクスポート・インポートモジュール

スキル・設定・スケジュール・サマリー（と完了チェック）をまとめたJSONドキュメントの
生成と読み込み機能を提供します。
"""

import json
from dataclasses import dataclass, field
from typing import List, Optional

from skillplan.models.schedule_models import Skill, Settings, ScheduleResult
from .logger import get_logger
from .progress_tracker import CompletionOverlay

logger = get_logger(__name__)


class StateLoadError(ValueError):
    """状態JSONの読み込みエラー"""


@dataclass
class AppState:
    """アプリケーション状態"""
    skills: List[Skill] = field(default_factory=list)
    settings: Optional[Settings] = None
    result: Optional[ScheduleResult] = None
    overlay: CompletionOverlay = field(default_factory=CompletionOverlay)


def export_state_json(skills: List[Skill], settings: Settings,
                      result: Optional[ScheduleResult] = None,
                      overlay: Optional[CompletionOverlay] = None, indent: int = 2) -> str:
    """
    状態をJSON文字列に変換

    Args:
        skills: スキル一覧
        settings: スケジュール設定
        result: 割り当て結果（未生成の場合はNone）
        overlay: 完了チェック（指定した場合は "completed" として出力）
        indent: インデント幅

    Returns:
        {skills, settings, schedule, summary[, completed]} 形式のJSON文字列
    """
    document = {
        "skills": [s.to_dict() for s in skills],
        "settings": settings.to_dict(),
        "schedule": None,
        "summary": None,
    }
    if result is not None:
        document.update(result.to_dict())
    if overlay is not None:
        document["completed"] = overlay.to_dict()
    return json.dumps(document, ensure_ascii=False, indent=indent)


def load_state_json(text: str) -> AppState:
    """
    JSON文字列から状態を復元

    Raises:
        StateLoadError: JSONの形式が不正な場合
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise StateLoadError(f"JSONの読み込みに失敗しました: {e}") from e

    if not isinstance(document, dict):
        raise StateLoadError("JSONのトップレベルはオブジェクトである必要があります")

    try:
        skills = [Skill.from_dict(s) for s in document.get("skills") or []]
        settings_data = document.get("settings")
        settings = Settings.from_dict(settings_data) if settings_data else None
        result = None
        if document.get("schedule") is not None:
            result = ScheduleResult.from_dict({
                "schedule": document["schedule"],
                "summary": document.get("summary") or [],
            })
        overlay = CompletionOverlay.from_dict(document.get("completed") or {})
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise StateLoadError(f"状態データの形式が不正です: {e}") from e

    # 読み込んだスケジュールに存在しないブロックの完了チェックは捨てる
    overlay.prune(result or ScheduleResult())

    logger.info(f"状態を読み込みました - スキル数: {len(skills)}")
    return AppState(skills=skills, settings=settings, result=result, overlay=overlay)
