"""
VDOT Pace Calculator - UI Components
再利用可能なUIコンポーネント
"""
import os
from typing import Dict, List

import pandas as pd
import streamlit as st

from ..config import APP_NAME, APP_VERSION
from ..formatting import format_pace
from ..vdot import PaceZone


def load_css() -> None:
    """外部CSSファイルを読み込んで適用"""
    css_path = os.path.join(os.path.dirname(__file__), "styles.css")

    if os.path.exists(css_path):
        with open(css_path, "r", encoding="utf-8") as f:
            css_content = f.read()
        st.markdown(f"<style>{css_content}</style>", unsafe_allow_html=True)
    else:
        # フォールバック：インラインCSS
        st.markdown("""
        <style>
            .main-header { font-size: 2.5rem; color: #1E88E5; text-align: center; }
            .version-tag { font-size: 0.9rem; color: #888; text-align: center; }
            .sub-header { font-size: 1.2rem; color: #666; text-align: center; margin-bottom: 2rem; }
        </style>
        """, unsafe_allow_html=True)


def render_header() -> None:
    """アプリヘッダーを表示"""
    st.markdown(f'<h1 class="main-header">🏃 {APP_NAME}</h1>', unsafe_allow_html=True)
    st.markdown(f'<p class="version-tag">Version {APP_VERSION}</p>', unsafe_allow_html=True)
    st.markdown('<p class="sub-header">ジャック・ダニエルズのVDOT理論に基づくペース・予想タイム計算</p>', unsafe_allow_html=True)


def render_footer() -> None:
    """フッターを表示"""
    st.markdown("---")
    st.caption(f"{APP_NAME} v{APP_VERSION}")


def render_pace_summary(summary: dict) -> None:
    """ペース・スピードを4列で表示

    Args:
        summary: pace_summary() の戻り値
    """
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("ペース (/km)", summary["pace_per_km"])
    col2.metric("ペース (/mile)", summary["pace_per_mile"])
    col3.metric("スピード (km/h)", summary["speed_kmh"])
    col4.metric("スピード (mph)", summary["speed_mph"])


def render_vdot_display(vdot: float, distance_name: str, time_display: str) -> None:
    """VDOT計算結果を表示"""
    st.markdown(f"""
<div class="vdot-display">
    <h3 style="margin: 0 0 1rem 0; color: white;">📊 VDOT計算結果</h3>
    <div style="font-size: 1.3rem;">
        🏃 {distance_name} {time_display} → VDOT: <strong>{vdot}</strong>
    </div>
</div>
    """, unsafe_allow_html=True)


def render_projection_table(df_projection: pd.DataFrame) -> None:
    """予想タイム表を表示

    Args:
        df_projection: projected_times_frame() の戻り値
    """
    df_display = pd.DataFrame({
        "距離": df_projection["name"],
        "予想タイム": df_projection["time"],
        "ペース (/km)": df_projection["pace_per_km"].map(format_pace),
    })
    st.dataframe(df_display, hide_index=True, use_container_width=True)


def render_zone_table(zones: Dict[str, PaceZone]) -> None:
    """トレーニングゾーンを表示"""
    df_display = pd.DataFrame([
        {"ゾーン": zone.name, "ペース (/km)": zone.display, "内容": zone.description}
        for zone in zones.values()
    ])
    st.dataframe(df_display, hide_index=True, use_container_width=True)


def render_equal_pace_table(rows: List[dict]) -> None:
    """同一ペースでの各距離タイムを表示"""
    df_display = pd.DataFrame({
        "距離": [row["name"] for row in rows],
        "タイム": [row["time"] for row in rows],
    })
    st.dataframe(df_display, hide_index=True, use_container_width=True)


def render_vdot_explanation() -> None:
    """VDOT解説を表示"""
    with st.expander("📖 VDOTとは"):
        st.markdown("""
VDOTは、ジャック・ダニエルズ博士が考案した走力指標です。レース結果から算出され、他の距離の予想タイムや適切なトレーニングペースを導き出すことができます。

- **Easy**: 会話ができる楽なペース。
- **Marathon Pace**: フルマラソンの目標ペース。
- **Threshold**: 乳酸閾値ペース。20〜30分維持できる強度。
- **Interval**: インターバルペース。3〜5分維持できる強度。
- **Repetition**: 反復ペース。短い距離のスピード練習用。
""")
