# This module builds the downloadable PDF report of an analysis
# The layout is done in two steps: first every page is laid out as a list of drawing operations
# (text lines and rectangles) while a cursor tracks the current page and height, then the finished
# document is drawn on a reportlab canvas and saved to bytes
# Text is measured with reportlab's font metrics so lines wrap exactly as they will be printed

import io
import logging
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import List, Optional, Tuple, Union

from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

import config
from errors import ReportGenerationError
from waste_classifier import AnalysisResult, top_predictions

logger = logging.getLogger(__name__)

# page geometry in points (A4)
PAGE_WIDTH = 595.28
PAGE_HEIGHT = 841.89
MARGIN = 50
CONTENT_WIDTH = PAGE_WIDTH - MARGIN * 2
HEADER_HEIGHT = 100
FOOTER_HEIGHT = 40
SECTION_SPACING = 20
SECTION_HEADER_HEIGHT = 30
# nothing may be drawn below this height, the footer lives there
FOOTER_BOUNDARY = FOOTER_HEIGHT + MARGIN

LINE_HEIGHT = {
    "title": 32,
    "heading": 24,
    "normal": 18,
    "small": 14,
}

# text inside sections is indented from the margin
TEXT_X = MARGIN + 10
TEXT_WIDTH = CONTENT_WIDTH - 20

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"

Color = Tuple[float, float, float]
PRIMARY_COLOR: Color = (0.06, 0.5, 0.31)
TEXT_COLOR: Color = (0.2, 0.2, 0.2)
LIGHT_GRAY: Color = (0.9, 0.9, 0.9)
WHITE: Color = (1, 1, 1)

REPORT_SUBTITLE = "Waste Analysis Report"
REPORT_CONTINUED = "Waste Analysis Report (Continued)"
RECOMMENDATIONS_SUBTITLE = "Recommended Energy Conversion Methods"
RECOMMENDATIONS_CONTINUED = "Recommendations (Continued)"

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# estimated heights of blocks that should start on the same page
CATEGORY_BLOCK_HEIGHT = 120
RECOMMENDATION_BLOCK_HEIGHT = 120
DETAIL_LINES_HEIGHT = 60


@dataclass(frozen=True)
class TextOp:
    text: str
    x: float
    y: float
    font: str
    size: float
    color: Color


@dataclass(frozen=True)
class RectOp:
    x: float
    y: float
    width: float
    height: float
    color: Color
    border_color: Optional[Color] = None


DrawOp = Union[TextOp, RectOp]


@dataclass
class ReportPage:
    ops: List[DrawOp] = field(default_factory=list)
    has_footer: bool = False

    @property
    def texts(self) -> List[str]:
        return [op.text for op in self.ops if isinstance(op, TextOp)]


class ReportDocument:
    """Pages of drawing operations. Can be serialized once, after that it is read-only."""

    def __init__(self, width: float = PAGE_WIDTH, height: float = PAGE_HEIGHT, title: str = REPORT_SUBTITLE):
        self.width = width
        self.height = height
        self.title = title
        self.pages: List[ReportPage] = []
        self._pdf_bytes: Optional[bytes] = None

    @property
    def is_finalized(self) -> bool:
        return self._pdf_bytes is not None

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def _check_writable(self) -> None:
        if self.is_finalized:
            raise RuntimeError("Report document was already serialized")

    def add_page(self) -> int:
        self._check_writable()
        self.pages.append(ReportPage())
        return len(self.pages) - 1

    def add(self, page_index: int, op: DrawOp) -> None:
        self._check_writable()
        self.pages[page_index].ops.append(op)

    def serialize(self) -> bytes:
        """Draw every page on a reportlab canvas and return the PDF bytes."""
        if self._pdf_bytes is not None:
            return self._pdf_bytes

        buffer = io.BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=(self.width, self.height), invariant=1)
        pdf.setTitle(self.title)
        pdf.setAuthor(config.BRAND_NAME.title())
        for page in self.pages:
            for op in page.ops:
                if isinstance(op, RectOp):
                    pdf.setFillColorRGB(*op.color)
                    if op.border_color is not None:
                        pdf.setStrokeColorRGB(*op.border_color)
                    pdf.rect(op.x, op.y, op.width, op.height, stroke=int(op.border_color is not None), fill=1)
                else:
                    pdf.setFillColorRGB(*op.color)
                    pdf.setFont(op.font, op.size)
                    pdf.drawString(op.x, op.y, op.text)
            pdf.showPage()
        pdf.save()

        self._pdf_bytes = buffer.getvalue()
        return self._pdf_bytes


@dataclass(frozen=True)
class LayoutCursor:
    """Where the next line goes: page index, baseline height and the subtitle used if a page break happens."""

    page_index: int
    y: float
    continuation: str = REPORT_CONTINUED

    def down(self, amount: float) -> "LayoutCursor":
        return replace(self, y=self.y - amount)


def measure(text: str, font: str = FONT_REGULAR, size: float = 10) -> float:
    return stringWidth(text, font, size)


class ReportLayout:
    """
    Lays out report content on a ReportDocument.

    Every drawing method takes the current LayoutCursor and returns the cursor after the drawn content,
    including a new page when the content did not fit.
    """

    def __init__(self, document: Optional[ReportDocument] = None):
        self.document = document or ReportDocument()

    # page furniture

    def start_page(self, subtitle: str, continuation: Optional[str] = None) -> LayoutCursor:
        page_index = self.document.add_page()
        self.draw_page_header(page_index, subtitle)
        return LayoutCursor(
            page_index=page_index,
            y=self.document.height - HEADER_HEIGHT - SECTION_SPACING,
            continuation=continuation or f"{subtitle} (Continued)",
        )

    def draw_page_header(self, page_index: int, subtitle: str) -> None:
        height = self.document.height
        self.document.add(page_index, RectOp(0, height - HEADER_HEIGHT, self.document.width, HEADER_HEIGHT, PRIMARY_COLOR))
        self.document.add(page_index, TextOp(config.BRAND_NAME, MARGIN, height - 50, FONT_BOLD, 24, WHITE))
        self.document.add(page_index, TextOp(subtitle, MARGIN, height - 80, FONT_REGULAR, 16, WHITE))

    def draw_page_footer(self, page_index: int) -> None:
        page = self.document.pages[page_index]
        if page.has_footer:
            return
        text_width = measure(config.FOOTER_TEXT, FONT_REGULAR, 10)
        x = (self.document.width - text_width) / 2
        self.document.add(page_index, TextOp(config.FOOTER_TEXT, x, 30, FONT_REGULAR, 10, TEXT_COLOR))
        page.has_footer = True

    def break_page(self, cursor: LayoutCursor) -> LayoutCursor:
        self.draw_page_footer(cursor.page_index)
        logger.debug(f"Page break after page {cursor.page_index + 1}")
        return self.start_page(cursor.continuation, cursor.continuation)

    def need_space(self, cursor: LayoutCursor, required: float) -> LayoutCursor:
        """Move to a new page when `required` points do not fit above the footer."""
        if cursor.y - required < FOOTER_BOUNDARY:
            return self.break_page(cursor)
        return cursor

    # content

    def draw_text_line(
        self,
        cursor: LayoutCursor,
        text: str,
        size: float = 12,
        font: str = FONT_REGULAR,
        line_height: str = "normal",
        x: float = TEXT_X,
        color: Color = TEXT_COLOR,
    ) -> LayoutCursor:
        self.document.add(cursor.page_index, TextOp(text, x, cursor.y, font, size, color))
        return cursor.down(LINE_HEIGHT[line_height])

    def draw_wrapped_text(
        self,
        cursor: LayoutCursor,
        text: str,
        size: float = 10,
        font: str = FONT_REGULAR,
        x: float = TEXT_X,
        width: float = TEXT_WIDTH,
        color: Color = TEXT_COLOR,
    ) -> LayoutCursor:
        """
        Draw text wrapped to `width`, breaking pages as needed.

        Words are added to a line while it still fits; a word longer than a whole line gets a line of its own.
        """
        line = ""
        for word in text.split():
            candidate = f"{line} {word}" if line else word
            if line and measure(candidate, font, size) > width:
                self.document.add(cursor.page_index, TextOp(line, x, cursor.y, font, size, color))
                cursor = cursor.down(LINE_HEIGHT["normal"])
                if cursor.y < FOOTER_BOUNDARY:
                    cursor = self.break_page(cursor)
                line = word
            else:
                line = candidate

        if line:
            self.document.add(cursor.page_index, TextOp(line, x, cursor.y, font, size, color))
            cursor = cursor.down(LINE_HEIGHT["normal"])
        return cursor

    def draw_section_header(self, cursor: LayoutCursor, text: str, bordered: bool = False) -> LayoutCursor:
        border = PRIMARY_COLOR if bordered else None
        self.document.add(
            cursor.page_index,
            RectOp(MARGIN, cursor.y - 10, CONTENT_WIDTH, SECTION_HEADER_HEIGHT, LIGHT_GRAY, border),
        )
        self.document.add(cursor.page_index, TextOp(text, MARGIN + 10, cursor.y, FONT_BOLD, 14, TEXT_COLOR))
        return cursor.down(SECTION_HEADER_HEIGHT)


def format_generated_on(moment: datetime) -> str:
    """Format like 'March 5, 2025 at 2:07 PM', in English whatever the server locale is."""
    hour = moment.hour % 12 or 12
    period = "AM" if moment.hour < 12 else "PM"
    month = MONTH_NAMES[moment.month - 1]
    return f"{month} {moment.day}, {moment.year} at {hour}:{moment.minute:02d} {period}"


def format_prediction_line(rank: int, label: str, confidence: float) -> str:
    return f"{rank}. {label}: {confidence * 100:.2f}%"


def report_filename(moment: Optional[datetime] = None) -> str:
    moment = moment or datetime.now()
    return f"{config.APP_NAME}_Analysis_{moment:%Y%m%d_%H%M%S}.pdf"


def build_report(result: AnalysisResult, generated_at: datetime) -> ReportDocument:
    """Lay out every section of the report and return the (not yet serialized) document."""
    layout = ReportLayout(ReportDocument(title=f"{config.APP_NAME} {REPORT_SUBTITLE}"))
    cursor = layout.start_page(REPORT_SUBTITLE, REPORT_CONTINUED)

    cursor = layout.draw_text_line(cursor, f"Generated on: {format_generated_on(generated_at)}", size=10, x=MARGIN)
    cursor = cursor.down(SECTION_SPACING - LINE_HEIGHT["normal"])

    # summary
    cursor = layout.need_space(cursor, SECTION_HEADER_HEIGHT + LINE_HEIGHT["normal"])
    cursor = layout.draw_section_header(cursor, "ANALYSIS SUMMARY")
    cursor = layout.draw_text_line(cursor, f"Waste Detected: {'Yes' if result.is_waste else 'No'}")
    if result.waste_categories:
        cursor = layout.draw_wrapped_text(cursor, f"Categories: {', '.join(result.category_names)}", size=12)
    cursor = cursor.down(SECTION_SPACING)

    # predictions
    cursor = layout.need_space(cursor, SECTION_HEADER_HEIGHT + LINE_HEIGHT["normal"])
    cursor = layout.draw_section_header(cursor, "AI PREDICTIONS")
    for rank, prediction in enumerate(top_predictions(result, config.DISPLAYED_PREDICTIONS), start=1):
        cursor = layout.need_space(cursor, LINE_HEIGHT["normal"])
        cursor = layout.draw_text_line(
            cursor, format_prediction_line(rank, prediction.label, prediction.confidence), size=11
        )
    cursor = cursor.down(SECTION_SPACING)

    # category details
    if result.category_details:
        cursor = layout.need_space(cursor, 50)
        cursor = layout.draw_section_header(cursor, "WASTE CATEGORY DETAILS")
        for detail in result.category_details:
            efficiency = detail.energy_efficiency
            cursor = layout.need_space(cursor, CATEGORY_BLOCK_HEIGHT)
            cursor = layout.draw_text_line(
                cursor, detail.category.value.upper(), size=12, font=FONT_BOLD, line_height="heading"
            )
            cursor = layout.draw_wrapped_text(cursor, detail.description)
            cursor = cursor.down(LINE_HEIGHT["small"])

            cursor = layout.need_space(cursor, DETAIL_LINES_HEIGHT)
            cursor = layout.draw_wrapped_text(cursor, f"Potential Energy: {efficiency.potential_energy}")
            cursor = cursor.down(LINE_HEIGHT["small"])

            cursor = layout.need_space(cursor, LINE_HEIGHT["normal"])
            cursor = layout.draw_wrapped_text(cursor, f"Conversion Efficiency: {efficiency.conversion_efficiency}")
            cursor = cursor.down(LINE_HEIGHT["small"])

            cursor = layout.need_space(cursor, LINE_HEIGHT["normal"])
            cursor = layout.draw_wrapped_text(cursor, f"Best Methods: {efficiency.best_methods}")
            cursor = cursor.down(SECTION_SPACING)

    # recommendations always start on a fresh page
    layout.draw_page_footer(cursor.page_index)
    cursor = layout.start_page(RECOMMENDATIONS_SUBTITLE, RECOMMENDATIONS_CONTINUED)
    for number, method in enumerate(result.recommendations, start=1):
        cursor = layout.need_space(cursor, RECOMMENDATION_BLOCK_HEIGHT)
        cursor = layout.draw_section_header(cursor, f"METHOD {number}: {method.method.upper()}", bordered=True)
        cursor = layout.draw_wrapped_text(cursor, method.description)
        cursor = cursor.down(LINE_HEIGHT["small"])

        cursor = layout.need_space(cursor, DETAIL_LINES_HEIGHT)
        cursor = layout.draw_wrapped_text(cursor, f"Efficiency: {method.efficiency}")
        cursor = cursor.down(LINE_HEIGHT["small"])

        cursor = layout.need_space(cursor, LINE_HEIGHT["normal"])
        cursor = layout.draw_wrapped_text(cursor, f"Waste Types: {method.waste_types}")
        cursor = cursor.down(LINE_HEIGHT["small"])

        cursor = layout.need_space(cursor, LINE_HEIGHT["normal"])
        cursor = layout.draw_wrapped_text(cursor, f"Environmental Benefits: {method.environmental_benefits}")
        cursor = cursor.down(SECTION_SPACING * 1.5)

    layout.draw_page_footer(cursor.page_index)
    return layout.document


def generate_report(result: AnalysisResult, generated_at: Optional[datetime] = None) -> bytes:
    """
    Build the PDF report for a waste analysis.

    Raises ReportGenerationError for results without waste and for any layout or serialization error,
    so a partial document is never returned.
    """
    if result is None or not result.is_waste:
        raise ReportGenerationError("Reports are only available for images that contain waste")

    generated_at = generated_at or datetime.now()
    try:
        document = build_report(result, generated_at)
        pdf_bytes = document.serialize()
    except Exception as e:
        logger.error(f"Error generating PDF: {e}")
        raise ReportGenerationError(str(e)) from e

    logger.info(f"Generated report with {document.page_count} pages ({len(pdf_bytes)} bytes)")
    return pdf_bytes
