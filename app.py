"""
VDOTペース計算機 - Streamlit App
レースタイムからペース・スピード・VDOT・予想タイム・練習ペースを計算

Version: 1.0.0
"""
import logging

import streamlit as st

from vdot_pace.config import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_DISTANCE,
    DEFAULT_TIME,
    LOG_LEVEL,
    PACE_SLIDER_MAX,
    PACE_SLIDER_MIN,
)
from vdot_pace.errors import InvalidInputError
from vdot_pace.formatting import format_clock, parse_clock
from vdot_pace.pace import (
    OPTIONS,
    equal_pace_times,
    get_distance_option,
    pace_per_km_seconds,
    pace_summary,
    time_from_pace_per_km,
    time_from_pace_per_mile,
    time_from_slider,
    time_from_speed_kmh,
    time_from_speed_mph,
)
from vdot_pace.ui.components import (
    load_css,
    render_equal_pace_table,
    render_footer,
    render_header,
    render_pace_summary,
    render_projection_table,
    render_vdot_display,
    render_vdot_explanation,
    render_zone_table,
)
from vdot_pace.vdot import Performance, projected_times_frame, training_zones

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# =============================================
# ページ設定
# =============================================
st.set_page_config(
    page_title=f"{APP_NAME} v{APP_VERSION}",
    page_icon="🏃",
    layout="wide",
    initial_sidebar_state="collapsed"
)


# =============================================
# 計算結果のキャッシュ
# =============================================
@st.cache_data
def cached_projections(vdot: float):
    return projected_times_frame(vdot)


@st.cache_data
def cached_zones(vdot: float):
    return training_zones(vdot)


# =============================================
# セッション状態
# =============================================
def init_session_state():
    """セッション状態の初期化"""
    if "distance_name" not in st.session_state:
        st.session_state.distance_name = DEFAULT_DISTANCE
    if "time_input" not in st.session_state:
        st.session_state.time_input = DEFAULT_TIME
    if "input_message" not in st.session_state:
        st.session_state.input_message = None


def _set_time(total_seconds):
    """換算したタイムを入力欄に反映（換算できなければメッセージを残す）"""
    if total_seconds is None or total_seconds <= 0:
        st.session_state.input_message = "ペース・スピードを読み取れませんでした。例: 4:30 / 4.5 / 12.5"
        return
    st.session_state.input_message = None
    st.session_state.time_input = format_clock(total_seconds)


def _on_slider_change():
    distance = get_distance_option(st.session_state.distance_name)
    _set_time(time_from_slider(st.session_state.pace_slider, distance))


def _on_pace_km_change():
    distance = get_distance_option(st.session_state.distance_name)
    _set_time(time_from_pace_per_km(st.session_state.pace_km_input, distance))


def _on_pace_mile_change():
    distance = get_distance_option(st.session_state.distance_name)
    _set_time(time_from_pace_per_mile(st.session_state.pace_mile_input, distance))


def _on_speed_kmh_change():
    distance = get_distance_option(st.session_state.distance_name)
    _set_time(time_from_speed_kmh(st.session_state.speed_kmh_input, distance))


def _on_speed_mph_change():
    distance = get_distance_option(st.session_state.distance_name)
    _set_time(time_from_speed_mph(st.session_state.speed_mph_input, distance))


# =============================================
# メイン
# =============================================
def main():
    init_session_state()
    load_css()
    render_header()

    # ================== 入力 ==================
    st.markdown("### ⏱ レースタイムを入力してください")
    col1, col2 = st.columns(2)
    with col1:
        st.selectbox("距離", [o.name for o in OPTIONS], key="distance_name")
    with col2:
        st.text_input("タイム（H:MM:SS / M:SS）", key="time_input")

    distance = get_distance_option(st.session_state.distance_name)
    total_seconds = parse_clock(st.session_state.time_input)
    if total_seconds is None:
        st.warning("タイムを読み取れませんでした。例: 20:00 / 1:35:00")
        total_seconds = 0

    # ================== ペース換算 ==================
    st.markdown("### 🏃 ペース・スピード")
    render_pace_summary(pace_summary(total_seconds, distance))

    # スライダーは入力タイムに追従させる
    st.session_state.pace_slider = int(
        min(max(pace_per_km_seconds(total_seconds, distance), PACE_SLIDER_MIN), PACE_SLIDER_MAX)
    )
    st.slider(
        "ペース（秒/km）",
        min_value=PACE_SLIDER_MIN,
        max_value=PACE_SLIDER_MAX,
        key="pace_slider",
        on_change=_on_slider_change,
    )

    with st.expander("🔁 ペース・スピードからタイムを計算"):
        col1, col2, col3, col4 = st.columns(4)
        col1.text_input("ペース (/km)", placeholder="4:30", key="pace_km_input", on_change=_on_pace_km_change)
        col2.text_input("ペース (/mile)", placeholder="7:15", key="pace_mile_input", on_change=_on_pace_mile_change)
        col3.text_input("スピード (km/h)", placeholder="13.3", key="speed_kmh_input", on_change=_on_speed_kmh_change)
        col4.text_input("スピード (mph)", placeholder="8.3", key="speed_mph_input", on_change=_on_speed_mph_change)
        if st.session_state.input_message:
            st.warning(st.session_state.input_message)

    st.markdown("#### 同じペースで走った場合")
    render_equal_pace_table(equal_pace_times(total_seconds, distance))

    # ================== VDOT ==================
    if total_seconds <= 0:
        render_footer()
        return

    try:
        performance = Performance.from_seconds(distance.km * 1000, total_seconds)
        vdot = performance.vdot()
    except InvalidInputError as e:
        logger.info("VDOTを計算できません: %s", e)
        st.error(f"VDOTを計算できません: {e}")
        render_footer()
        return

    st.markdown("---")
    render_vdot_display(vdot, distance.name, format_clock(total_seconds))
    render_vdot_explanation()

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("### 🏁 予想タイム")
        try:
            render_projection_table(cached_projections(vdot))
        except InvalidInputError as e:
            st.error(f"予想タイムを計算できません: {e}")
    with col2:
        st.markdown("### 📈 練習ペース")
        try:
            render_zone_table(cached_zones(vdot))
        except InvalidInputError as e:
            st.error(f"練習ペースを計算できません: {e}")

    render_footer()


if __name__ == "__main__":
    main()
