import os
import requests
import pandas as pd
import streamlit as st
import plotly.colors as pc
import plotly.graph_objects as go

from steamviz.clicks import resolve_click
from steamviz.taxonomy import GENRE_COLORS, GENRES_TITLE, RATINGS, RELEASES_TITLE, ratings_title

FONT = dict(family="Segoe UI, Helvetica Neue, sans-serif", size=16)

def get_api_url():
    if "API_URL" not in st.session_state:
        st.session_state.API_URL = os.getenv("API_URL", "http://127.0.0.1:8000")
    return st.session_state.API_URL

st.set_page_config(page_title="Steam Game Visualization", layout="wide")
st.sidebar.header("Settings")
st.sidebar.text_input("API URL", key="API_URL", value=get_api_url())
API_URL = st.session_state.API_URL

st.markdown(
    "<h1 style='text-align:center'>Steam Game Visualization</h1>",
    unsafe_allow_html=True,
)
st.markdown(
    "<p style='text-align:center;font-size:20px;color:#666'>"
    "This project visualizes trends in major video game releases from 2001 to 2025, "
    "focusing on well-known titles from prominent companies. The top chart shows the amount "
    "of these major games released each year. The bottom treemap shows the category trends "
    "among major releases, and the bottom histogram illustrates the ratings distribution, "
    "showing how these high-profile games were scored across various rating ranges.</p>",
    unsafe_allow_html=True,
)

def fetch_json(path, params=None, method="GET", payload=None, api_url=None, timeout=12):
    base = api_url or API_URL
    url = f"{base}{path}"
    try:
        if method.upper() == "GET":
            r = requests.get(url, params=params, timeout=timeout)
        elif method.upper() == "PUT":
            r = requests.put(url, json=payload, timeout=timeout)
        else:
            r = requests.post(url, json=payload, timeout=timeout)
        r.raise_for_status()
        return r.json()
    except requests.exceptions.RequestException as e:
        st.error(f"Request to {url} failed: {e}")
        return None

def put_selection(year):
    return fetch_json("/selection", method="PUT", payload={"year": int(year)})

def releases_figure(by_year):
    data = (
        pd.DataFrame({"year": [int(y) for y in by_year], "count": list(by_year.values())})
        .sort_values("year")
    )
    fig = go.Figure(
        go.Scatter(
            x=data["year"],
            y=data["count"],
            mode="lines+markers",
            line=dict(color="#5B9BD5", width=4, shape="spline"),
            marker=dict(color="#2E75B6", size=12),
            hovertemplate="<b>%{x}</b><br>%{y} releases<extra></extra>",
        )
    )
    fig.update_layout(
        title=dict(text=RELEASES_TITLE, x=0.5, font=dict(size=28)),
        font=FONT,
        height=600,
        xaxis=dict(tickformat="d", dtick=1),
        yaxis=dict(rangemode="tozero"),
        clickmode="event+select",
    )
    return fig

def treemap_figure(tiles):
    fig = go.Figure(
        go.Treemap(
            labels=[t["genre"] for t in tiles],
            parents=[""] * len(tiles),
            values=[t["count"] for t in tiles],
            text=[t["percent"] for t in tiles],
            texttemplate="%{label} (%{text})",
            hovertemplate="<b>%{label}</b><br>%{value} releases<extra></extra>",
            marker=dict(colors=[GENRE_COLORS.get(t["genre"], "#7f7f7f") for t in tiles]),
            tiling=dict(pad=4),
        )
    )
    fig.update_layout(title=dict(text=GENRES_TITLE, x=0.5, font=dict(size=28)), font=FONT, height=520)
    return fig

def ratings_figure(year, bars):
    shades = pc.sample_colorscale("Blues", [i / (len(RATINGS) - 1) for i in range(len(RATINGS))])
    color_by_rating = dict(zip(RATINGS, shades))
    fig = go.Figure(
        go.Bar(
            x=[b["rating"] for b in bars],
            y=[b["count"] for b in bars],
            marker=dict(color=[color_by_rating.get(b["rating"]) for b in bars]),
            hovertemplate="<b>%{x}</b><br>%{y} releases<extra></extra>",
        )
    )
    fig.update_layout(
        title=dict(text=ratings_title(year), x=0.5, font=dict(size=28)),
        font=FONT,
        height=607,
        xaxis=dict(title="Positive Rating", tickangle=-45),
        yaxis=dict(title="Number of Releases", tickformat="d", rangemode="tozero"),
    )
    return fig

def genre_legend():
    chips = "".join(
        f"<span style='margin-right:18px'><span style='display:inline-block;width:16px;height:16px;"
        f"background:{color};vertical-align:middle'></span> {genre}</span>"
        for genre, color in GENRE_COLORS.items()
    )
    st.markdown("#### Legend")
    st.markdown(chips, unsafe_allow_html=True)

view = fetch_json("/dashboard")
if not view or view.get("state") != "ready":
    st.info("Dataset not loaded yet. The charts appear once the releases file is available.")
    st.stop()

# The releases chart key changes with every dropdown pick so a stale
# chart selection cannot override the dropdown.
chart_key = f"releases_chart_{st.session_state.setdefault('chart_generation', 0)}"
clicked, st.session_state.last_clicked_year = resolve_click(
    st.session_state.get(chart_key), st.session_state.get("last_clicked_year")
)
if clicked is not None:
    view = put_selection(clicked) or view

selected = view.get("selected_year")
years = list(view.get("years") or [])
if selected is not None and selected not in years:
    years = sorted(years + [selected])
st.session_state.year_select = selected

def on_year_change():
    st.session_state.chart_generation += 1
    st.session_state.last_clicked_year = None
    put_selection(st.session_state.year_select)

_, mid, _ = st.columns([2, 1, 2])
mid.selectbox("Select Year:", options=years, key="year_select", on_change=on_year_change)

st.plotly_chart(
    releases_figure(view.get("releases_by_year") or {}),
    key=chart_key,
    on_select="rerun",
    selection_mode="points",
)

left, right = st.columns(2)
with left:
    tiles = view.get("treemap") or []
    if tiles:
        st.plotly_chart(treemap_figure(tiles), key="genre_treemap")
    else:
        st.info(f"No releases recorded for {selected}.")
    genre_legend()
with right:
    st.plotly_chart(ratings_figure(selected, view.get("ratings") or []), key="rating_bars")
