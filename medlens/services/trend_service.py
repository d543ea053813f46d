"""
Lab trend derivation.

Observations from every document are grouped by test name (case-insensitive),
ordered by their document's clinical date, and the latest change of each
numeric series is classified as improving, worsening or stable.

The result is a pure function of the documents passed in. Nothing is cached;
callers recompute after any document change.
"""

import math
from typing import Dict, Iterable, List, Optional, Tuple

from medlens.config import settings
from medlens.core.logging import logger
from medlens.core.parsing import document_date_key, parse_float_prefix
from medlens.models.document import MedicalDocument
from medlens.models.lab_result import LabObservation, LabStatus
from medlens.models.trend import (
    LabTrend,
    TrendDataPoint,
    TrendReferenceRange,
    TrendStatus,
)

# (document date, observation) in collection order
DatedObservation = Tuple[str, LabObservation]


def canonical_test_key(test_name: str) -> str:
    """Grouping key for a test: its lower-cased name."""
    return test_name.lower()


def _numeric_value(observation: LabObservation) -> Optional[float]:
    value = observation.value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    return parse_float_prefix(value)


def classify_trend(
    data_points: List[TrendDataPoint],
    baseline_status: LabStatus,
    threshold: float,
) -> TrendStatus:
    """
    Classify the change between the last two data points.

    Args:
        data_points: Numeric series sorted ascending by date
        baseline_status: Status of the group's chronologically first observation
        threshold: Fraction of the previous value treated as noise

    Returns:
        UNKNOWN for fewer than two points, otherwise the first matching rule:
        change within the noise band is STABLE; a move into normal is
        IMPROVING; a move out of normal is WORSENING; rising from a high
        baseline or falling from a low baseline is WORSENING; anything
        else is STABLE.
    """
    if len(data_points) < 2:
        return TrendStatus.UNKNOWN

    recent = data_points[-1]
    previous = data_points[-2]

    diff = recent.value - previous.value
    noise_band = abs(previous.value) * threshold

    if abs(diff) <= noise_band:
        return TrendStatus.STABLE
    if recent.status == LabStatus.NORMAL and previous.status != LabStatus.NORMAL:
        return TrendStatus.IMPROVING
    if recent.status != LabStatus.NORMAL and previous.status == LabStatus.NORMAL:
        return TrendStatus.WORSENING
    if diff > 0 and baseline_status == LabStatus.HIGH:
        return TrendStatus.WORSENING
    if diff < 0 and baseline_status == LabStatus.LOW:
        return TrendStatus.WORSENING

    # Includes a high baseline coming back down without reaching normal
    return TrendStatus.STABLE


def group_observations(documents: Iterable[MedicalDocument]) -> Dict[str, List[DatedObservation]]:
    """Collect every observation under its canonical test key, keeping first-seen key order."""
    groups: Dict[str, List[DatedObservation]] = {}
    for document in documents:
        for observation in document.lab_results:
            key = canonical_test_key(observation.test_name)
            groups.setdefault(key, []).append((document.date, observation))
    return groups


def build_trend(observations: List[DatedObservation], threshold: float) -> Optional[LabTrend]:
    """
    Build the trend for one group of observations.

    Returns None when no observation in the group has a numeric value.
    """
    ordered = sorted(observations, key=lambda item: document_date_key(item[0]))

    data_points = []
    for document_date, observation in ordered:
        value = _numeric_value(observation)
        if value is None:
            continue
        data_points.append(TrendDataPoint(
            date=document_date,
            value=value,
            status=observation.status,
        ))

    if not data_points:
        return None

    # The earliest observation names the series, numeric or not
    first = ordered[0][1]

    units = {observation.unit for _, observation in ordered}
    has_mixed_units = len(units) > 1
    if has_mixed_units:
        logger.warning(
            f"Trend '{first.test_name}' mixes units {sorted(units)}; "
            f"values are shown in '{first.unit}' without conversion"
        )

    reference_range = None
    if first.reference_range is not None:
        reference_range = TrendReferenceRange(
            low=first.reference_range.low,
            high=first.reference_range.high,
        )

    return LabTrend(
        test_name=first.test_name,
        category=first.category,
        unit=first.unit,
        data_points=data_points,
        current_status=classify_trend(data_points, first.status, threshold),
        reference_range=reference_range,
        has_mixed_units=has_mixed_units,
    )


def compute_trends(
    documents: Iterable[MedicalDocument],
    *,
    stability_threshold: Optional[float] = None,
) -> List[LabTrend]:
    """
    Derive one trend per distinct test across all documents.

    Args:
        documents: Every document of one user, in any order
        stability_threshold: Overrides the configured noise band

    Returns:
        Trends in order of first appearance of each test; empty for no documents
    """
    threshold = settings.STABILITY_THRESHOLD if stability_threshold is None else stability_threshold

    trends = []
    for key, observations in group_observations(documents).items():
        trend = build_trend(observations, threshold)
        if trend is None:
            logger.debug(f"No numeric values for '{key}', trend skipped")
            continue
        trends.append(trend)

    return trends
