import plotly.graph_objects as go
import pytest

import charts
from waste_classifier import AnalysisResult, Prediction, classify
from waste_data import WasteCategory, category_detail


@pytest.fixture
def bottle_result():
    return classify([
        ("plastic bottle", 0.81234),
        ("water bottle, flask", 0.10),
        ("water jug", 0.04),
        ("pop bottle", 0.02),
        ("beer bottle", 0.012),
        ("vase", 0.005),
    ])


def test_radar_scales_and_inverts_axes():
    profile = charts.efficiency_profile(category_detail(WasteCategory.PLASTIC))
    values = dict(zip(profile["subject"], profile["value"]))

    assert values == pytest.approx({
        "Energy Potential": 9.0,
        "Conversion Efficiency": 7.5,
        "Processing Complexity": 4.0,
        "Carbon Footprint": 3.5,
        "Resource Recovery": 7.0,
    })
    assert set(profile["category"]) == {"plastic"}
    assert all(0 <= value <= charts.RADAR_FULL_MARK for value in profile["value"])


def test_energy_potential_per_category(bottle_result):
    data = charts.energy_potential(bottle_result)

    assert list(data["name"]) == ["Plastic", "Glass"]
    assert list(data["Energy Potential"]) == [90, 15]
    assert list(data["Conversion Efficiency"]) == [75, 10]


def test_category_distribution(bottle_result):
    data = charts.category_distribution(bottle_result)

    assert list(data["name"]) == ["plastic", "glass"]
    assert list(data["value"]) == [1, 1]


def test_prediction_chart_uses_short_labels_and_one_decimal(bottle_result):
    data = charts.prediction_chart_data(bottle_result, 5)

    assert len(data) == 5
    assert data["name"].iloc[0] == "plastic bottle"
    assert data["probability"].iloc[0] == pytest.approx(81.2)
    assert data["name"].iloc[1] == "water bottle"


def test_prediction_table_keeps_every_prediction(bottle_result):
    table = charts.prediction_table(bottle_result)

    assert len(table) == 6
    assert table["Probability"].iloc[0] == "81.2%"
    assert table["Class"].iloc[1] == "water bottle, flask"


def test_empty_result_gives_empty_frames():
    result = AnalysisResult(predictions=(Prediction("tabby cat", 0.9),), is_waste=False)

    assert charts.category_distribution(result).empty
    assert charts.energy_potential(result).empty
    assert list(charts.energy_potential(result).columns) == ["name", "Energy Potential", "Conversion Efficiency"]


def test_charts_do_not_change_the_result(bottle_result):
    before = bottle_result.waste_categories

    charts.energy_potential(bottle_result)
    charts.prediction_chart_data(bottle_result)

    assert bottle_result.waste_categories == before


def test_build_figures(bottle_result):
    figures = [
        charts.build_category_pie(charts.category_distribution(bottle_result)),
        charts.build_energy_bar(charts.energy_potential(bottle_result)),
        charts.build_efficiency_radar(charts.efficiency_profile(bottle_result.category_details[0])),
        charts.build_prediction_bar(charts.prediction_chart_data(bottle_result)),
    ]

    assert all(isinstance(fig, go.Figure) for fig in figures)
    radar = figures[2].data[0]
    assert len(radar.r) == 6
    assert radar.r[0] == radar.r[-1]
