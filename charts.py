# This module prepares the data shown in the three result tabs of the analysis page
# The prepare functions return pandas DataFrames and never change the analysis result,
# the build functions turn those frames into plotly figures for st.plotly_chart
# The knowledge base stores metrics on a 0-100 scale, the radar chart shows them on a 0-10 scale

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from waste_classifier import AnalysisResult, top_predictions
from waste_data import CategoryDetail

COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#8884d8", "#82ca9d"]

RADAR_FULL_MARK = 10
# on the radar a bigger area must mean better, so these two axes are flipped
INVERTED_AXES = ("Processing Complexity", "Carbon Footprint")


def category_distribution(result: AnalysisResult) -> pd.DataFrame:
    """One row per detected category with how many times it was detected."""
    counts = {}
    for category in result.waste_categories:
        counts[category.value] = counts.get(category.value, 0) + 1
    return pd.DataFrame({"name": list(counts.keys()), "value": list(counts.values())})


def energy_potential(result: AnalysisResult) -> pd.DataFrame:
    """Potential energy and conversion efficiency per category (0-100)."""
    rows = [
        {
            "name": detail.category.label,
            "Energy Potential": detail.energy_efficiency.metrics.potential_energy,
            "Conversion Efficiency": detail.energy_efficiency.metrics.conversion_efficiency,
        }
        for detail in result.category_details
    ]
    return pd.DataFrame(rows, columns=["name", "Energy Potential", "Conversion Efficiency"])


def efficiency_profile(detail: CategoryDetail) -> pd.DataFrame:
    """The five radar axes of one category on a 0-10 scale, higher is better on every axis."""
    metrics = detail.energy_efficiency.metrics
    raw = {
        "Energy Potential": metrics.potential_energy,
        "Conversion Efficiency": metrics.conversion_efficiency,
        "Processing Complexity": metrics.processing_complexity,
        "Carbon Footprint": metrics.carbon_footprint,
        "Resource Recovery": metrics.resource_recovery,
    }
    rows = []
    for subject, value in raw.items():
        scaled = value / 100 * RADAR_FULL_MARK
        if subject in INVERTED_AXES:
            scaled = RADAR_FULL_MARK - scaled
        rows.append({"subject": subject, "value": round(scaled, 1), "category": detail.category.value})
    return pd.DataFrame(rows, columns=["subject", "value", "category"])


def prediction_chart_data(result: AnalysisResult, count: int = 5) -> pd.DataFrame:
    """Top predictions for the bar chart, short label and percentage with 1 decimal."""
    rows = [
        {"name": prediction.label.split(",")[0], "probability": round(prediction.percent, 1)}
        for prediction in top_predictions(result, count)
    ]
    return pd.DataFrame(rows, columns=["name", "probability"])


def prediction_table(result: AnalysisResult) -> pd.DataFrame:
    """Every prediction in classifier order, formatted for display."""
    rows = [
        {"Class": prediction.label, "Probability": f"{prediction.percent:.1f}%"}
        for prediction in result.predictions
    ]
    return pd.DataFrame(rows, columns=["Class", "Probability"])


def build_category_pie(data: pd.DataFrame) -> go.Figure:
    fig = px.pie(data, names="name", values="value", color_discrete_sequence=COLORS)
    fig.update_traces(textinfo="label+percent")
    fig.update_layout(margin=dict(t=20, b=20, l=20, r=20))
    return fig


def build_energy_bar(data: pd.DataFrame) -> go.Figure:
    fig = px.bar(
        data,
        x="name",
        y=["Energy Potential", "Conversion Efficiency"],
        barmode="group",
        color_discrete_sequence=["#8884d8", "#82ca9d"],
    )
    fig.update_layout(xaxis_title=None, yaxis_title="Score (0-100)", yaxis_range=[0, 100], legend_title=None)
    return fig


def build_efficiency_radar(data: pd.DataFrame, color: str = COLORS[0]) -> go.Figure:
    # repeat the first point so the polygon is closed
    subjects = list(data["subject"]) + list(data["subject"][:1])
    values = list(data["value"]) + list(data["value"][:1])
    name = data["category"].iloc[0] if len(data) else ""
    fig = go.Figure(
        go.Scatterpolar(r=values, theta=subjects, fill="toself", name=name, line_color=color, opacity=0.6)
    )
    fig.update_layout(
        polar=dict(radialaxis=dict(visible=True, range=[0, RADAR_FULL_MARK])),
        showlegend=False,
        margin=dict(t=30, b=30, l=40, r=40),
    )
    return fig


def build_prediction_bar(data: pd.DataFrame) -> go.Figure:
    fig = px.bar(
        data,
        x="probability",
        y="name",
        orientation="h",
        labels={"probability": "Probability (%)", "name": ""},
        color_discrete_sequence=[COLORS[0]],
    )
    fig.update_layout(xaxis_range=[0, 100], yaxis=dict(autorange="reversed"))
    fig.update_traces(hovertemplate="%{y}: %{x}%<extra></extra>")
    return fig
