"""
Tests for lab trend derivation.
"""

import pytest

from medlens.data import demo_documents
from medlens.models.lab_result import LabStatus
from medlens.models.trend import TrendDataPoint, TrendStatus
from medlens.services.trend_service import classify_trend, compute_trends


def _points(*readings):
    return [
        TrendDataPoint(date=f"2025-0{i + 1}-01", value=value, status=LabStatus(status))
        for i, (value, status) in enumerate(readings)
    ]


# ============================================================================
# CLASSIFICATION
# ============================================================================

@pytest.mark.parametrize("readings, baseline, expected", [
    # Within the 5% band
    ([(98, "normal"), (100, "normal")], "normal", TrendStatus.STABLE),
    # Leaving normal
    ([(95, "normal"), (130, "high")], "normal", TrendStatus.WORSENING),
    # Returning to normal
    ([(130, "high"), (95, "normal")], "high", TrendStatus.IMPROVING),
    # Rising from a high baseline
    ([(120, "high"), (140, "high")], "high", TrendStatus.WORSENING),
    # Falling from a low baseline
    ([(12, "low"), (10, "low")], "low", TrendStatus.WORSENING),
    # Falling from a high baseline without reaching normal
    ([(160, "high"), (130, "high")], "high", TrendStatus.STABLE),
])
def test_classify_trend(readings, baseline, expected):
    assert classify_trend(_points(*readings), LabStatus(baseline), 0.05) == expected


def test_single_point_is_unknown():
    assert classify_trend(_points((100, "high")), LabStatus.HIGH, 0.05) == TrendStatus.UNKNOWN


def test_any_change_from_zero_leaves_the_noise_band():
    points = _points((0, "normal"), (0.1, "normal"))
    # Outside the band, but a normal series has nowhere to move
    assert classify_trend(points, LabStatus.NORMAL, 0.05) == TrendStatus.STABLE


# ============================================================================
# TREND ASSEMBLY
# ============================================================================

def test_points_sorted_by_document_date(ldl_documents):
    """Documents arrive out of order; points follow the clinical date."""
    (trend,) = compute_trends(ldl_documents)

    assert [p.date for p in trend.data_points] == ["2025-06-10", "2025-09-20", "2025-12-15"]
    assert [p.value for p in trend.data_points] == [145.0, 118.0, 135.0]
    # 118 -> 135 rises past the 5.9 band from a high baseline
    assert trend.current_status == TrendStatus.WORSENING
    assert trend.latest.value == 135.0


def test_grouping_is_case_insensitive(make_document, make_observation):
    documents = [
        make_document("2025-02-01", [make_observation("ldl cholesterol", 120.0, "high")]),
        make_document("2025-01-01", [make_observation("LDL Cholesterol", 110.0, "high")]),
    ]
    (trend,) = compute_trends(documents)

    assert trend.test_name == "LDL Cholesterol"
    assert len(trend.data_points) == 2


def test_non_numeric_values_are_excluded(make_document, make_observation):
    documents = [
        make_document("2025-01-01", [make_observation("Troponin", "trace", "high", unit="ng/mL")]),
        make_document("2025-02-01", [make_observation("Troponin", 0.02, "normal", unit="ng/mL")]),
        make_document("2025-03-01", [make_observation("Culture", "negative", "normal", unit="")]),
    ]
    trends = compute_trends(documents)

    assert [t.test_name for t in trends] == ["Troponin"]
    assert [p.value for p in trends[0].data_points] == [0.02]
    assert trends[0].current_status == TrendStatus.UNKNOWN


def test_numeric_text_values_count(make_document, make_observation):
    documents = [
        make_document("2025-01-01", [make_observation("Potassium", "4.1", "normal", unit="mmol/L")]),
        make_document("2025-02-01", [make_observation("Potassium", 4.2, "normal", unit="mmol/L")]),
    ]
    (trend,) = compute_trends(documents)
    assert [p.value for p in trend.data_points] == [4.1, 4.2]


def test_mixed_units_are_flagged(make_document, make_observation):
    documents = [
        make_document("2025-01-01", [make_observation("Glucose", 100.0, "normal", unit="mg/dL")]),
        make_document("2025-02-01", [make_observation("Glucose", 5.6, "normal", unit="mmol/L")]),
    ]
    (trend,) = compute_trends(documents)

    assert trend.has_mixed_units is True
    assert trend.unit == "mg/dL"


def test_reference_range_from_first_observation(make_document, make_observation):
    documents = [
        make_document("2025-02-01", [make_observation("HDL", 50.0, "normal", reference_range={"low": 40})]),
        make_document("2025-01-01", [make_observation("HDL", 45.0, "normal", reference_range={"low": 0, "high": 60})]),
    ]
    (trend,) = compute_trends(documents)

    assert trend.reference_range.low == 0.0
    assert trend.reference_range.high == 60.0


def test_threshold_override(make_document, make_observation):
    documents = [
        make_document("2025-01-01", [make_observation("LDL", 120.0, "high")]),
        make_document("2025-02-01", [make_observation("LDL", 130.0, "high")]),
    ]
    assert compute_trends(documents)[0].current_status == TrendStatus.WORSENING
    assert compute_trends(documents, stability_threshold=0.1)[0].current_status == TrendStatus.STABLE


def test_no_documents_no_trends():
    assert compute_trends([]) == []


def test_demo_data_trends():
    trends = {t.test_name: t for t in compute_trends(demo_documents())}

    assert set(trends) == {
        "Glucose, Fasting",
        "Hemoglobin A1c",
        "Total Cholesterol",
        "LDL Cholesterol",
        "HDL Cholesterol",
        "Creatinine",
    }
    assert trends["LDL Cholesterol"].current_status == TrendStatus.WORSENING
    assert trends["Glucose, Fasting"].current_status == TrendStatus.WORSENING
    assert trends["HDL Cholesterol"].current_status == TrendStatus.UNKNOWN
    assert len(trends["Total Cholesterol"].data_points) == 3
