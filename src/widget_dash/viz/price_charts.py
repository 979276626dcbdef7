"""Plotly figure builders for the widget charts."""

from __future__ import annotations

from collections.abc import Iterable

import plotly.graph_objects as go

from ..data.normalization import history_frame
from ..domain import HistoricalPoint, HourlyPoint


def _empty_figure(title: str) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(text="No data to display", showarrow=False, x=0.5, y=0.5, xref="paper", yref="paper")
    fig.update_layout(title=title, template="plotly_white")
    return fig


def make_price_chart(series: Iterable[HistoricalPoint], title: str, previous_close: float | None = None) -> go.Figure:
    """Line chart of closing prices with a dashed previous-close reference."""
    frame = history_frame(series)
    if frame.empty:
        return _empty_figure(title)

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=frame["date"],
            y=frame["price"],
            mode="lines",
            name="Price",
            hovertemplate="%{x|%b %d, %Y}<br>$%{y:.2f}<extra></extra>",
        )
    )

    if previous_close is not None:
        fig.add_hline(y=previous_close, line_dash="dash", line_color="gray", annotation_text="Prev close")

    fig.update_layout(
        title=title,
        xaxis_title="Date",
        yaxis_title="Price",
        yaxis_tickprefix="$",
        yaxis_tickformat=".2f",
        hovermode="x unified",
        template="plotly_white",
        showlegend=False,
    )
    return fig


def make_temperature_chart(hourly: Iterable[HourlyPoint], title: str) -> go.Figure:
    """Hourly temperature line for the weather widget."""
    points = [point for point in hourly if point.temperature is not None]
    if not points:
        return _empty_figure(title)

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=[point.time for point in points],
            y=[point.temperature for point in points],
            mode="lines",
            name="Temperature",
        )
    )
    fig.update_layout(
        title=title,
        xaxis_title="Time",
        yaxis_title="°C",
        hovermode="x unified",
        template="plotly_white",
        showlegend=False,
    )
    return fig
