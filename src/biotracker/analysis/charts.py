"""Plotly figures for the tracker dashboard."""
from __future__ import annotations

from typing import Iterable

import pandas as pd
import plotly.graph_objects as go

from biotracker.common.biomarkers import COLORS, MAX_SCORE, BiomarkerLike, parse_selection
from biotracker.common.dates import DISPLAY_FORMAT


def build_trend_figure(
    frame: pd.DataFrame,
    biomarkers: Iterable[BiomarkerLike],
    dark: bool = True,
    height: int = 350,
) -> go.Figure:
    """
    Line chart of the selected biomarkers over time.

    Args:
        frame: Output of RecordStore.to_frame() ('date' + one column per biomarker)
        biomarkers: Biomarkers to plot, in legend order
        dark: Use the dark template
        height: Figure height in pixels

    Returns:
        Figure with one trace per selected biomarker that has a column in frame
    """
    fig = go.Figure()

    for biomarker in parse_selection(biomarkers):
        if biomarker.value not in frame.columns:
            continue
        color = COLORS[biomarker]
        fig.add_trace(
            go.Scatter(
                x=frame["date"],
                y=frame[biomarker.value],
                mode="lines+markers",
                name=biomarker.value,
                line=dict(color=color, width=3, shape="spline"),
                marker=dict(size=8, color=color),
                connectgaps=True,
            )
        )

    fig.update_layout(
        template="plotly_dark" if dark else "plotly_white",
        height=height,
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02),
        margin=dict(l=0, r=0, t=40, b=0),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
    )
    fig.update_xaxes(tickformat=DISPLAY_FORMAT, tickangle=-45)
    fig.update_yaxes(range=[0, MAX_SCORE], tickvals=list(range(0, MAX_SCORE + 1, 2)))

    return fig
