"""codecity — interactive Streamlit dashboard."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import plotly.express as px
import streamlit as st

from codecity.analyzers import METRICS
from codecity.cli import DEFAULT_CITY_OUTPUT
from codecity.treemap import ROOT_DIRECTORY, build_treemap_frame, read_city_csv, revision_color

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title="codecity",
    page_icon="🏙",
    layout="wide",
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

@st.cache_data
def load_city(path: str) -> pd.DataFrame:
    return build_treemap_frame(read_city_csv(path))


@st.cache_data
def load_metric(path: str) -> pd.DataFrame:
    return pd.read_csv(path)


# ---------------------------------------------------------------------------
# Sidebar — load data
# ---------------------------------------------------------------------------
st.sidebar.title("🏙 codecity")
st.sidebar.markdown("Code city explorer")

city_path = st.sidebar.text_input("City file", value=str(Path.cwd() / DEFAULT_CITY_OUTPUT))
metrics_dir = st.sidebar.text_input("Metrics directory", value=str(Path.cwd() / "output"))

try:
    city = load_city(city_path)
except FileNotFoundError:
    st.error(f"City file not found: `{city_path}`\n\nRun `codecity city` to generate it.")
    st.stop()

if city.empty:
    st.error("The city file has no rows.")
    st.stop()

st.sidebar.divider()

# ---------------------------------------------------------------------------
# Sidebar — filters
# ---------------------------------------------------------------------------
max_revs = int(city["revisions"].max())
min_revisions = st.sidebar.slider("Minimum revisions", 1, max(max_revs, 1), 1)
directories = sorted(city["directory"].unique().tolist())
selected_dirs = st.sidebar.multiselect("Directories", options=directories, default=[])

view = city[city["revisions"] >= min_revisions]
if selected_dirs:
    view = view[view["directory"].isin(selected_dirs)]

st.sidebar.caption(f"{len(view):,} of {len(city):,} files shown")

# ---------------------------------------------------------------------------
# Page title
# ---------------------------------------------------------------------------
st.title("Code city")
st.caption(f"Source: `{city_path}`  ·  {int(view['lines'].sum()):,} lines of code  ·  {len(view):,} files")

tab1, tab2 = st.tabs([
    "🏙 City",
    "📋 Metrics",
])

# ============================================================
# TAB 1 — CITY
# ============================================================
with tab1:
    c1, c2, c3 = st.columns(3)
    c1.metric("Files", f"{len(view):,}")
    c2.metric("Lines of code", f"{int(view['lines'].sum()):,}")
    c3.metric("Most revised", f"{int(view['revisions'].max()) if not view.empty else 0:,}")

    if view.empty:
        st.info("No files match the current filters.")
    else:
        # Blocks sized by code lines, coloured blue → red by revision count
        color_map = {
            str(r): revision_color(r, max_revs) for r in sorted(view["revisions"].unique())
        }
        fig_city = px.treemap(
            view.assign(revision_bucket=view["revisions"].astype(str)),
            path=[px.Constant(ROOT_DIRECTORY), "directory", "name"],
            values="lines",
            color="revision_bucket",
            color_discrete_map={"(?)": "#dddddd", **color_map},
            hover_data={"file_path": True, "lines": True, "revisions": True, "revision_bucket": False},
        )
        fig_city.update_traces(
            hovertemplate=(
                "<b>%{label}</b><br>"
                "Path: %{customdata[0]}<br>"
                "Lines: %{customdata[1]:,}<br>"
                "Revisions: %{customdata[2]}<extra></extra>"
            ),
        )
        fig_city.update_layout(height=720, margin=dict(l=0, r=0, t=10, b=0), showlegend=False)
        st.plotly_chart(fig_city, use_container_width=True)

    st.subheader("Hot spots")
    top_n = st.slider("Top N files", 5, 50, 15, key="hot_n")
    hot = view.nlargest(top_n, "revisions").sort_values("revisions")
    fig_hot = px.bar(
        hot, x="revisions", y="file_path", orientation="h",
        labels={"file_path": "", "revisions": "Revisions"},
        text="revisions",
    )
    fig_hot.update_traces(textposition="outside")
    fig_hot.update_layout(height=max(280, top_n * 26), margin=dict(l=0, r=40, t=10, b=0))
    st.plotly_chart(fig_hot, use_container_width=True)


# ============================================================
# TAB 2 — METRICS
# ============================================================
with tab2:
    available = [name for name in METRICS if (Path(metrics_dir) / f"{name}.csv").exists()]
    if not available:
        st.info(f"No metric reports in `{metrics_dir}`.\n\nRun `codecity all --out-dir {metrics_dir}` to generate them.")
    else:
        metric = st.selectbox("Metric", options=available)
        df_metric = load_metric(str(Path(metrics_dir) / f"{metric}.csv"))
        st.dataframe(df_metric, use_container_width=True, hide_index=True)
