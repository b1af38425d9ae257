import pytest

from waste_data import (
    CATEGORY_KEYWORDS,
    WASTE_INDICATOR_KEYWORDS,
    WasteCategory,
    category_detail,
    conversion_methods,
)

METHOD_COUNTS = {
    WasteCategory.ORGANIC: 3,
    WasteCategory.PLASTIC: 3,
    WasteCategory.METAL: 2,
    WasteCategory.GLASS: 2,
    WasteCategory.ELECTRONIC: 3,
    WasteCategory.TEXTILE: 3,
    WasteCategory.HAZARDOUS: 3,
    WasteCategory.UNKNOWN: 2,
}


@pytest.mark.parametrize("category", list(WasteCategory))
def test_every_category_has_details_and_methods(category):
    detail = category_detail(category)

    assert detail.category is category
    assert detail.description
    assert len(conversion_methods(category)) == METHOD_COUNTS[category]
    for method in conversion_methods(category):
        assert method.method and method.description and method.efficiency


@pytest.mark.parametrize("category", list(WasteCategory))
def test_metrics_use_percent_scale(category):
    metrics = category_detail(category).energy_efficiency.metrics

    for value in vars(metrics).values():
        assert 0 <= value <= 100


def test_lookup_by_name():
    assert category_detail("plastic") is category_detail(WasteCategory.PLASTIC)


def test_unknown_has_no_keywords():
    assert CATEGORY_KEYWORDS[WasteCategory.UNKNOWN] == ()


def test_indicator_keywords_include_category_keywords():
    for keywords in CATEGORY_KEYWORDS.values():
        assert set(keywords) <= set(WASTE_INDICATOR_KEYWORDS)
    assert all(keyword == keyword.lower() for keyword in WASTE_INDICATOR_KEYWORDS)


def test_conversion_methods_returns_a_copy():
    methods = conversion_methods(WasteCategory.METAL)
    methods.clear()

    assert len(conversion_methods(WasteCategory.METAL)) == 2
