import dataclasses
from datetime import datetime

import pytest

import config
import report_generator
from errors import ReportGenerationError
from report_generator import (
    FOOTER_BOUNDARY,
    FONT_REGULAR,
    RECOMMENDATIONS_SUBTITLE,
    REPORT_SUBTITLE,
    TEXT_X,
    LayoutCursor,
    ReportLayout,
    TextOp,
    build_report,
    format_generated_on,
    format_prediction_line,
    generate_report,
    report_filename,
)
from waste_classifier import AnalysisResult, Prediction, classify
from waste_data import WasteCategory, category_detail, conversion_methods

GENERATED_AT = datetime(2025, 3, 5, 14, 7, 9)

BOTTLE_PREDICTIONS = [
    ("plastic bottle", 0.81),
    ("water bottle", 0.10),
    ("water jug", 0.04),
    ("pop bottle", 0.02),
    ("beer bottle", 0.012),
    ("vase", 0.005),
    ("soap dispenser", 0.003),
]


def all_texts(document):
    return [text for page in document.pages for text in page.texts]


def text_ops(document):
    return [op for page in document.pages for op in page.ops if isinstance(op, TextOp)]


@pytest.fixture
def bottle_result():
    return classify(BOTTLE_PREDICTIONS)


@pytest.fixture
def mixed_result():
    return classify([
        ("plastic bottle", 0.4),
        ("tin can", 0.2),
        ("cellular phone", 0.15),
        ("paint can", 0.1),
        ("cloth bag", 0.1),
        ("paper towel", 0.05),
    ])


def test_generated_on_format():
    assert format_generated_on(GENERATED_AT) == "March 5, 2025 at 2:07 PM"
    assert format_generated_on(datetime(2025, 11, 20, 0, 5)) == "November 20, 2025 at 12:05 AM"


class LocaleFreeDatetime(datetime):
    """Fails if formatted through strftime, whose month names and AM/PM follow the server locale."""

    def strftime(self, fmt):
        raise AssertionError("locale dependent formatting")

    def __format__(self, fmt):
        raise AssertionError("locale dependent formatting")


def test_generated_on_does_not_depend_on_locale():
    moment = LocaleFreeDatetime(2025, 12, 31, 12, 0)

    assert format_generated_on(moment) == "December 31, 2025 at 12:00 PM"
    assert format_generated_on(LocaleFreeDatetime(2025, 1, 2, 9, 30)) == "January 2, 2025 at 9:30 AM"


def test_filename_and_generated_on_share_the_timestamp(bottle_result):
    moment = datetime(2025, 3, 5, 14, 7, 59)
    texts = all_texts(build_report(bottle_result, moment))

    assert "Generated on: March 5, 2025 at 2:07 PM" in texts
    assert report_filename(moment) == "EcoConvert_Analysis_20250305_140759.pdf"


def test_prediction_line_has_two_decimals():
    assert format_prediction_line(1, "plastic bottle", 0.81) == "1. plastic bottle: 81.00%"
    assert format_prediction_line(3, "vase", 0.00512) == "3. vase: 0.51%"


def test_report_filename():
    assert report_filename(GENERATED_AT) == "EcoConvert_Analysis_20250305_140709.pdf"


def test_sections_appear_in_order(bottle_result):
    texts = all_texts(build_report(bottle_result, GENERATED_AT))

    order = [
        "Generated on: March 5, 2025 at 2:07 PM",
        "ANALYSIS SUMMARY",
        "Waste Detected: Yes",
        "Categories: plastic, glass",
        "AI PREDICTIONS",
        "WASTE CATEGORY DETAILS",
        "PLASTIC",
        "GLASS",
        "METHOD 1: PYROLYSIS",
    ]
    positions = [texts.index(text) for text in order]
    assert positions == sorted(positions)


def test_only_top_five_predictions(bottle_result):
    texts = all_texts(build_report(bottle_result, GENERATED_AT))

    assert "1. plastic bottle: 81.00%" in texts
    assert "5. beer bottle: 1.20%" in texts
    assert not any(text.startswith("6. ") for text in texts)


def test_recommendations_start_on_their_own_page(bottle_result):
    document = build_report(bottle_result, GENERATED_AT)

    page = next(page for page in document.pages if "METHOD 1: PYROLYSIS" in page.texts)
    assert RECOMMENDATIONS_SUBTITLE in page.texts
    assert "WASTE CATEGORY DETAILS" not in page.texts
    assert REPORT_SUBTITLE in document.pages[0].texts

    methods = [text for text in all_texts(document) if text.startswith("METHOD ")]
    expected = [
        f"METHOD {number}: {method.method.upper()}"
        for number, method in enumerate(bottle_result.recommendations, start=1)
    ]
    assert methods == expected


def test_every_page_has_one_header_and_one_footer(mixed_result):
    document = build_report(mixed_result, GENERATED_AT)

    assert document.page_count > 2
    for page in document.pages:
        assert page.has_footer
        assert page.texts.count(config.FOOTER_TEXT) == 1
        assert page.texts.count(config.BRAND_NAME) == 1


def test_content_stays_above_the_footer(mixed_result):
    document = build_report(mixed_result, GENERATED_AT)

    for op in text_ops(document):
        if op.text != config.FOOTER_TEXT:
            assert op.y >= FOOTER_BOUNDARY


def test_wrapped_text_breaks_page_without_losing_words():
    layout = ReportLayout()
    cursor = layout.start_page("Notes")
    cursor = dataclasses.replace(cursor, y=FOOTER_BOUNDARY + 40)
    words = [f"word{i}" for i in range(150)]

    cursor = layout.draw_wrapped_text(cursor, " ".join(words))

    document = layout.document
    assert document.page_count == 2
    assert cursor.page_index == 1
    assert document.pages[0].has_footer
    assert "Notes (Continued)" in document.pages[1].texts

    lines = [op.text for op in text_ops(document) if op.x == TEXT_X]
    assert " ".join(lines).split() == words
    assert len([op for op in document.pages[0].ops if isinstance(op, TextOp) and op.x == TEXT_X]) == 3


def test_long_description_is_kept_whole():
    description = " ".join(f"detail{i}" for i in range(450))
    detail = dataclasses.replace(category_detail(WasteCategory.PLASTIC), description=description)
    result = AnalysisResult(
        predictions=(Prediction("plastic bag", 0.9),),
        is_waste=True,
        waste_categories=(WasteCategory.PLASTIC,),
        category_details=(detail,),
        recommendations=tuple(conversion_methods(WasteCategory.PLASTIC)),
    )

    document = build_report(result, GENERATED_AT)

    body = [op.text for op in text_ops(document) if op.x == TEXT_X and op.size == 10 and op.font == FONT_REGULAR]
    assert description in " ".join(body)
    assert "Waste Analysis Report (Continued)" in all_texts(document)


def test_same_input_gives_same_bytes(bottle_result):
    first = generate_report(bottle_result, GENERATED_AT)
    second = generate_report(bottle_result, GENERATED_AT)

    assert first.startswith(b"%PDF")
    assert first == second


def test_document_is_read_only_after_serialize(bottle_result):
    document = build_report(bottle_result, GENERATED_AT)
    pdf_bytes = document.serialize()

    assert document.is_finalized
    assert document.serialize() is pdf_bytes
    with pytest.raises(RuntimeError):
        document.add_page()
    with pytest.raises(RuntimeError):
        ReportLayout(document).draw_text_line(LayoutCursor(0, 500), "late")


@pytest.mark.parametrize("result", [None, classify([("tabby cat", 0.9)])])
def test_refuses_results_without_waste(result):
    with pytest.raises(ReportGenerationError):
        generate_report(result)


def test_serialization_failure_is_reported(bottle_result, monkeypatch):
    def broken(self):
        raise OSError("disk full")

    monkeypatch.setattr(report_generator.ReportDocument, "serialize", broken)

    with pytest.raises(ReportGenerationError) as excinfo:
        generate_report(bottle_result, GENERATED_AT)
    assert excinfo.value.user_message == "Failed to generate the report. Please try again."
