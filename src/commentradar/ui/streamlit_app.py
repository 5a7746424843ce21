"""Streamlit dashboard for CommentRadar."""

import streamlit as st
import logging
import pandas as pd
import plotly.express as px
from pathlib import Path

# Add parent directory to path for imports
import sys
sys.path.append(str(Path(__file__).parent.parent.parent))

from commentradar.core.config import settings
from commentradar.core.constants import UIConstants
from commentradar.core.exceptions import CommentRadarError
from commentradar.core.scoring import dominant_emotion, sentiment_balance
from commentradar.services.analysis_service import AnalysisService
from commentradar.utils.data_prep import prepare_export
from commentradar.utils.display import (
    emotion_rows, emotion_label, format_percent, paginate, total_pages,
)

# Configure logging
logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)


@st.cache_data(show_spinner=False, ttl=600)
def _analyze(video_url: str):
    return AnalysisService().analyze(video_url)


def _link_form():
    """URL input; a submitted link is kept in the ?url= query parameter."""
    with st.form("link_form"):
        col1, col2 = st.columns([4, 1])
        with col1:
            url = st.text_input(
                "🎥 YouTube Link",
                value=st.query_params.get("url", ""),
                placeholder=UIConstants.URL_PLACEHOLDER,
            )
        with col2:
            st.write("")
            submitted = st.form_submit_button("✨ Analyze", use_container_width=True)
    if submitted and url.strip():
        # A fresh submit re-fetches even if the link is cached
        _analyze.clear()
        st.query_params["url"] = url.strip()
        st.session_state["page"] = 0


def _donut(rows):
    df = pd.DataFrame(rows)
    df["text"] = [
        f"{r['emoji']} {r['percent']}%" if r["show_label"] else "" for r in rows
    ]
    fig = px.pie(
        df, names="label", values="value", hole=0.55,
        color="label", color_discrete_map={r["label"]: r["accent"] for r in rows},
    )
    fig.update_traces(text=df["text"], textinfo="text", sort=False, direction="clockwise")
    fig.update_layout(showlegend=True, margin=dict(t=10, b=10, l=10, r=10))
    return fig


def _bars(rows):
    df = pd.DataFrame(rows)
    fig = px.bar(
        df, x="value", y="label", orientation="h", text="percent",
        color="label", color_discrete_map={r["label"]: r["accent"] for r in rows},
    )
    fig.update_traces(texttemplate="%{text}%")
    fig.update_layout(
        showlegend=False, xaxis_tickformat=".0%", yaxis_title=None, xaxis_title=None,
        yaxis=dict(autorange="reversed"), margin=dict(t=10, b=10, l=10, r=10),
    )
    return fig


def _comment_list(comments):
    pages = total_pages(len(comments))
    page = min(st.session_state.get("page", 0), pages - 1)

    for comment in paginate(comments, page):
        emotion = comment.dominant_emotion
        with st.container(border=True):
            st.markdown(f"**{comment.author}** · 👍 {comment.likes}")
            st.write(comment.text)
            st.caption(
                f"{emotion_label(emotion)} {format_percent(comment.emotions[emotion.value])}%"
                f" · {comment.published_at}"
            )

    col1, col2, col3 = st.columns([1, 2, 1])
    with col1:
        if st.button("◀ Prev", disabled=page == 0):
            st.session_state["page"] = page - 1
            st.rerun()
    with col2:
        st.markdown(f"<div style='text-align:center'>{page + 1} / {pages}</div>",
                    unsafe_allow_html=True)
    with col3:
        if st.button("Next ▶", disabled=page >= pages - 1):
            st.session_state["page"] = page + 1
            st.rerun()


# Page configuration
st.set_page_config(
    page_title="CommentRadar: Comment Emotions",
    page_icon="📡",
    layout="wide"
)

st.title("📡 CommentRadar")
st.write("Paste a YouTube link to see how its top comments feel.")

_link_form()

video_url = st.query_params.get("url", "")
if not video_url:
    st.stop()

try:
    with st.spinner("🔄 Fetching comments..."):
        analysis = _analyze(video_url)
except CommentRadarError as e:
    logger.error(f"Analysis failed for {video_url}: {e}")
    st.error(str(e))
    st.stop()

st.header(analysis.video_title)
st.caption(analysis.channel_name)

rows = emotion_rows(analysis.summary)
has_comments = analysis.total_comments > 0
balance = sentiment_balance(analysis.summary)

col1, col2, col3 = st.columns(3)
with col1:
    st.metric("🗨️ Comments", analysis.total_comments)
with col2:
    st.metric("🎭 Dominant emotion",
              emotion_label(dominant_emotion(analysis.summary)) if has_comments else "No data")
with col3:
    st.markdown("**🌈 Balance**")
    st.markdown(
        f"Positive **{format_percent(balance.positive)}%** · "
        f"Neutral {format_percent(balance.neutral)}% · "
        f"Negative {format_percent(balance.negative)}%"
    )

chart_col, bar_col = st.columns([1.3, 1])
with chart_col:
    st.subheader("🌀 Emotion distribution")
    st.plotly_chart(_donut(rows), use_container_width=True)
with bar_col:
    st.subheader("📊 By emotion")
    st.plotly_chart(_bars(rows), use_container_width=True)

st.subheader("💬 Top comments")
if has_comments:
    _comment_list(analysis.top_comments)
else:
    st.info("No comments to show.")

with st.expander("Export"):
    st.json(prepare_export(analysis), expanded=False)
