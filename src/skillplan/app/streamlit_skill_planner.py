import streamlit as st
from datetime import date
import sys
import os

# srcディレクトリをパスに追加
sys.path.append(os.path.join(os.path.dirname(__file__), "..", ".."))

from skillplan.algorithms import allocate
from skillplan.models import SchedulerError, default_settings, Lunch
from skillplan.utils.config import get_config
from skillplan.utils.logger import setup_logging, get_logger
from skillplan.utils.progress_tracker import CompletionOverlay
from skillplan.utils.schedule_converter import format_minutes
from skillplan.utils.state_io import load_state_json, StateLoadError
from skillplan.app.ui_components import (
    create_skill_input_form, display_skill_list, create_settings_form,
    display_summary, display_timetable, display_progress, create_download_buttons,
    clear_completion_keys
)

config = get_config()
setup_logging()
logger = get_logger(__name__)

st.set_page_config(page_title=config.app_name, page_icon="📅", layout="wide")


# ---------- 初期状態 ----------
def initial_settings():
    return default_settings(
        date.today(),
        daily_hours=config.default_daily_hours,
        plan_days=config.default_plan_days,
        start_time=config.default_start_time,
        end_time=config.default_end_time,
        work_block_mins=config.default_work_block_mins,
        break_mins=config.default_break_mins,
        lunch=Lunch(start=config.default_lunch_start, duration=config.default_lunch_duration),
    )


def reset_state():
    st.session_state.skills = []
    st.session_state.settings = initial_settings()
    st.session_state.result = None
    st.session_state.overlay = CompletionOverlay()
    clear_completion_keys(st.session_state)


if "skills" not in st.session_state:
    reset_state()

st.title(f"📅 {config.app_name}")

# ---------- Sidebar：スキル ----------
st.session_state.skills = create_skill_input_form(st.session_state.skills)
st.session_state.skills = display_skill_list(st.session_state.skills)

# ---------- Sidebar：状態の読み込み ----------
with st.sidebar.expander("JSONから読み込み"):
    up_file = st.file_uploader("JSON をアップロード", type="json")
    if up_file is not None and st.button("📂 読み込み"):
        try:
            state = load_state_json(up_file.getvalue().decode("utf-8"))
            st.session_state.skills = state.skills
            st.session_state.settings = state.settings or initial_settings()
            st.session_state.result = state.result
            st.session_state.overlay = state.overlay
            clear_completion_keys(st.session_state)
            st.success("読み込み完了 ✅")
        except (StateLoadError, UnicodeDecodeError) as e:
            st.error(str(e))

# ---------- Sidebar：設定と生成 ----------
new_settings = create_settings_form(st.session_state.settings)
if new_settings is not None:
    st.session_state.settings = new_settings
    try:
        st.session_state.result = allocate(
            st.session_state.skills, new_settings, max_days=config.max_schedule_days
        )
        # 完了チェックは前回の時間割に対するものなので引き継がない
        st.session_state.overlay = CompletionOverlay()
        clear_completion_keys(st.session_state)
        st.success("スケジュールを生成しました ✅")
        unallocated = st.session_state.result.unallocated_minutes(st.session_state.skills)
        if unallocated > 0:
            st.warning(f"割り当てられなかった時間があります: {format_minutes(unallocated)}")
    except SchedulerError as e:
        logger.warning(f"スケジュール生成失敗: {e}")
        st.session_state.result = None
        st.error(f"生成に失敗しました: {e}")

if st.sidebar.button("🔄 リセット"):
    reset_state()
    st.rerun()

# ---------- 結果表示 ----------
result = st.session_state.result
if result is None:
    st.info("スキルを登録して「スケジュール生成」を押すと、ここに時間割が表示されます")
else:
    create_download_buttons(st.session_state.skills, st.session_state.settings, result,
                            st.session_state.overlay)
    display_summary(result)
    display_progress(result, st.session_state.overlay)
    display_timetable(result, st.session_state.overlay)
