# This module turns the labels returned by the image model into a waste analysis
# The image model only knows general objects ("water bottle", "banana", ...), so we look for
# keywords from the knowledge base inside each label to decide if the picture shows waste,
# which waste categories it belongs to and which energy conversion methods to recommend

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple, Union

from waste_data import (
    CATEGORY_KEYWORDS,
    WASTE_INDICATOR_KEYWORDS,
    CategoryDetail,
    EnergyConversionMethod,
    WasteCategory,
    category_detail,
    conversion_methods,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Prediction:
    """One ranked label from the image model."""

    label: str
    confidence: float

    @property
    def percent(self) -> float:
        return self.confidence * 100


@dataclass(frozen=True)
class AnalysisResult:
    predictions: Tuple[Prediction, ...]
    is_waste: bool
    waste_categories: Tuple[WasteCategory, ...] = field(default_factory=tuple)
    category_details: Tuple[CategoryDetail, ...] = field(default_factory=tuple)
    recommendations: Tuple[EnergyConversionMethod, ...] = field(default_factory=tuple)

    @property
    def category_names(self) -> List[str]:
        return [category.value for category in self.waste_categories]


PredictionLike = Union[Prediction, Tuple[str, float]]


def _as_prediction(item: PredictionLike) -> Prediction:
    if isinstance(item, Prediction):
        return item
    label, confidence = item
    return Prediction(label=str(label), confidence=float(confidence))


# checks the labels in order and stops at the first one containing a waste keyword
def detect_waste(predictions: Iterable[Prediction]) -> bool:
    for prediction in predictions:
        label = prediction.label.lower()
        if any(keyword in label for keyword in WASTE_INDICATOR_KEYWORDS):
            return True
    return False


# collects every category whose keywords appear in any label, keeping the order they were first found
def detect_categories(predictions: Iterable[Prediction]) -> List[WasteCategory]:
    found: List[WasteCategory] = []
    for prediction in predictions:
        label = prediction.label.lower()
        for category, keywords in CATEGORY_KEYWORDS.items():
            if category not in found and any(keyword in label for keyword in keywords):
                found.append(category)
    return found


def classify(predictions: Sequence[PredictionLike]) -> AnalysisResult:
    """
    Map ranked classifier labels onto the waste taxonomy.

    A result without any match is valid: is_waste is False and no categories are returned.
    When the labels look like waste but match no category, the category is "unknown".
    """
    ranked = tuple(_as_prediction(item) for item in predictions)

    is_waste = detect_waste(ranked)
    categories = detect_categories(ranked)
    if is_waste and not categories:
        categories = [WasteCategory.UNKNOWN]

    details = tuple(category_detail(category) for category in categories)
    recommendations = tuple(
        method for category in categories for method in conversion_methods(category)
    )

    logger.info(
        f"Classified {len(ranked)} predictions: waste={is_waste}, "
        f"categories={[category.value for category in categories]}"
    )
    return AnalysisResult(
        predictions=ranked,
        is_waste=is_waste,
        waste_categories=tuple(categories),
        category_details=details,
        recommendations=recommendations,
    )


def top_predictions(result: AnalysisResult, count: int = 5) -> List[Prediction]:
    """Return the most confident predictions, highest first."""
    return sorted(result.predictions, key=lambda prediction: prediction.confidence, reverse=True)[:count]
