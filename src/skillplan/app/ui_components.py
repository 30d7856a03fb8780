"""
UIコンポーネントモジュール

Streamlitアプリケーションで使用する共通UIコンポーネントを提供します。
"""

import streamlit as st
from datetime import date, datetime
from typing import List, MutableMapping, Optional

from skillplan.models import (
    Skill, Settings, Lunch, Priority, ScheduleMode, BlockType, ScheduleResult,
    SchedulerError, add_skill, remove_skill, parse_date
)
from skillplan.utils.constants import (
    MODE_CHOICES, PRIORITY_CHOICES, BLOCK_TYPE_ICONS, BLOCK_TYPE_LABELS, MIN_DAILY_HOURS
)
from skillplan.utils.progress_tracker import CompletionOverlay, is_block_past
from skillplan.utils.schedule_converter import (
    format_minutes, summary_to_dataframe, days_to_dataframe, daily_skill_matrix, dataframe_to_csv
)
from skillplan.utils.state_io import export_state_json

# 完了チェックボックスのsession_stateキー
COMPLETION_KEY_PREFIX = "done_"


def completion_key(day_date: str, index: int) -> str:
    return f"{COMPLETION_KEY_PREFIX}{day_date}_{index}"


def clear_completion_keys(state: MutableMapping) -> None:
    """完了チェックボックスの状態を削除（再生成・リセット時に古いチェックを残さない）"""
    for key in [k for k in state.keys() if str(k).startswith(COMPLETION_KEY_PREFIX)]:
        del state[key]


def initial_daily_hours(current: Optional[float], default: float = 6.0) -> float:
    """1日の学習時間入力の初期値（入力の下限未満は下限に合わせる）"""
    return max(MIN_DAILY_HOURS, float(current or default))


def create_skill_input_form(skills: List[Skill]) -> List[Skill]:
    """
    スキル追加フォームを作成

    Args:
        skills: 登録済みスキル

    Returns:
        追加後のスキル一覧（追加されなかった場合は元の一覧）
    """
    with st.sidebar.form("skill_form", clear_on_submit=True):
        st.subheader("1️⃣ スキル登録")
        name = st.text_input("スキル名", placeholder="例: Python")
        c1, c2 = st.columns(2)
        priority = c1.selectbox("優先度", PRIORITY_CHOICES, index=1)
        est_hours = c2.number_input("推定時間 (h)", min_value=0.1, value=10.0, step=0.5)
        submitted = st.form_submit_button("➕ スキルを追加")

    if not submitted:
        return skills

    try:
        return add_skill(skills, Skill.create(name, Priority(priority), float(est_hours)))
    except SchedulerError as e:
        st.sidebar.error(str(e))
        return skills


def display_skill_list(skills: List[Skill]) -> List[Skill]:
    """登録済みスキルの一覧と削除ボタンを表示"""
    st.sidebar.write("**登録済みスキル**")
    if not skills:
        st.sidebar.caption("スキルがまだ登録されていません")
        return skills

    for skill in skills:
        c1, c2 = st.sidebar.columns([4, 1])
        c1.write(f"{skill.name} · {skill.priority.value} · {skill.est_hours}h")
        if c2.button("🗑️", key=f"remove_{skill.id}"):
            return remove_skill(skills, skill.id)
    return skills


def create_settings_form(current: Settings) -> Optional[Settings]:
    """
    スケジュール設定フォームを作成

    Args:
        current: 現在の設定（初期値として使用）

    Returns:
        生成ボタンが押された場合は入力された設定、それ以外はNone
    """
    st.sidebar.subheader("2️⃣ スケジュール設定")
    mode = st.sidebar.radio("期間", MODE_CHOICES, index=MODE_CHOICES.index(current.mode.value), horizontal=True)

    daily_hours = current.daily_hours
    start_date, end_date = current.start_date, current.end_date
    if mode == ScheduleMode.DAILY.value:
        daily_hours = st.sidebar.number_input("1日の学習時間 (h)", min_value=MIN_DAILY_HOURS,
                                              value=initial_daily_hours(daily_hours), step=0.5)
    else:
        c1, c2 = st.sidebar.columns(2)
        start_date = c1.date_input("開始日", value=parse_date(start_date) if start_date else date.today())
        end_date = c2.date_input("終了日", value=parse_date(end_date) if end_date else date.today())
        start_date, end_date = start_date.strftime("%Y-%m-%d"), end_date.strftime("%Y-%m-%d")

    c1, c2 = st.sidebar.columns(2)
    start_time = c1.text_input("開始時刻", current.start_time)
    end_time = c2.text_input("終了時刻", current.end_time)

    c1, c2 = st.sidebar.columns(2)
    work_block_mins = c1.number_input("作業 (分)", min_value=25, value=int(current.work_block_mins))
    break_mins = c2.number_input("休憩 (分)", min_value=0, value=int(current.break_mins))

    lunch = None
    if st.sidebar.checkbox("昼休憩を入れる", value=current.lunch is not None):
        default_lunch = current.lunch or Lunch(start="13:00", duration=60)
        c1, c2 = st.sidebar.columns(2)
        lunch_start = c1.text_input("昼休憩開始", default_lunch.start)
        lunch_duration = c2.number_input("長さ (分)", min_value=1, value=int(default_lunch.duration))
        lunch = Lunch(start=lunch_start, duration=int(lunch_duration))

    if not st.sidebar.button("🛠️ スケジュール生成", type="primary"):
        return None

    return Settings(
        mode=ScheduleMode(mode),
        daily_hours=float(daily_hours) if daily_hours is not None else None,
        start_date=start_date,
        end_date=end_date,
        start_time=start_time,
        end_time=end_time,
        work_block_mins=int(work_block_mins),
        break_mins=int(break_mins),
        lunch=lunch,
    )


def display_summary(result: ScheduleResult) -> None:
    """スキル別サマリーを表示"""
    st.subheader("📊 スケジュールサマリー")
    df = summary_to_dataframe(result.summary)
    st.dataframe(df[["skill", "total_time", "percent"]], use_container_width=True, hide_index=True)

    matrix = daily_skill_matrix(result.days)
    if not matrix.empty:
        with st.expander("日別・スキル別の学習時間 (分)"):
            st.dataframe(matrix, use_container_width=True)


def display_timetable(result: ScheduleResult, overlay: CompletionOverlay,
                      now: Optional[datetime] = None) -> None:
    """日別の時間割をタブで表示（workブロックには完了チェック付き）"""
    st.subheader("📅 日別時間割")
    if not result.days:
        st.info("生成された日がありません")
        return

    now = now or datetime.now()
    tabs = st.tabs([parse_date(day.date).strftime("%a, %b %d") for day in result.days])
    for tab, day in zip(tabs, result.days):
        with tab:
            for index, block in enumerate(day.blocks):
                block_type = block.block_type.value
                c1, c2, c3, c4 = st.columns([2, 5, 2, 1])
                c1.markdown(f"`{block.start} - {block.end}`")
                label = block.skill_name or BLOCK_TYPE_LABELS.get(block_type, block_type)
                past = " (終了)" if is_block_past(day.date, block, now) else ""
                c2.write(f"{BLOCK_TYPE_ICONS.get(block_type, '')} {label}{past}")
                c3.write(f"{block.minutes} 分")
                if block.block_type == BlockType.WORK:
                    checked = c4.checkbox("完了", value=overlay.is_completed(day.date, index),
                                          key=completion_key(day.date, index), label_visibility="collapsed")
                    if checked != overlay.is_completed(day.date, index):
                        overlay.toggle(day.date, index)


def display_progress(result: ScheduleResult, overlay: CompletionOverlay) -> None:
    """完了済み時間をスキル別に表示"""
    done = overlay.completed_minutes(result)
    if not done:
        return
    st.subheader("✅ 進捗")
    for item in result.summary:
        minutes = done.get(item.skill_id, 0)
        st.write(f"{item.skill_name}: {format_minutes(minutes)} / {format_minutes(item.minutes)}")
        st.progress(min(1.0, minutes / item.minutes))


def create_download_buttons(skills: List[Skill], settings: Settings, result: ScheduleResult,
                            overlay: Optional[CompletionOverlay] = None) -> None:
    """JSON・CSVのダウンロードボタンを表示"""
    stamp = f"{datetime.now():%Y%m%d_%H%M}"
    c1, c2, c3 = st.columns(3)
    c1.download_button("JSON DL", export_state_json(skills, settings, result, overlay),
                       file_name=f"skillplan_{stamp}.json", mime="application/json")
    c2.download_button("時間割 CSV DL", dataframe_to_csv(days_to_dataframe(result.days)),
                       file_name=f"timetable_{stamp}.csv", mime="text/csv")
    c3.download_button("サマリー CSV DL", dataframe_to_csv(summary_to_dataframe(result.summary)),
                       file_name=f"summary_{stamp}.csv", mime="text/csv")
