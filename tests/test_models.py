"""Tests for the dashboard data model and its validation."""
from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from physio_dashboard import sample_data
from physio_dashboard.models import (
    Age,
    Assessment,
    DashboardDataError,
    HistoricalData,
    MalformedDateError,
    Measurement,
    MissingFieldError,
    OutOfRangeError,
    ResultData,
    ResultMetric,
    UserStats,
    history_from_records,
)


class TestUserStats:
    """Test UserStats parsing and validation."""

    def test_from_dict_sample(self):
        stats = UserStats.from_dict(sample_data.USER_STATS)
        assert stats.assessment.number == 1
        assert stats.assessment.date == date(2024, 10, 16)
        assert stats.age.years == 17
        assert stats.age.birth_date == date(1994, 6, 29)
        assert stats.weight == Measurement(58.8, 0)
        assert stats.height == Measurement(1.63, 0)

    def test_accepts_date_objects(self):
        assessment = Assessment(number=2, date=date(2025, 1, 5))
        assert assessment.date == date(2025, 1, 5)

    def test_malformed_date(self):
        with pytest.raises(MalformedDateError):
            Assessment(number=1, date="2024-10-16")
        with pytest.raises(MalformedDateError):
            Age(years=17, birth_date="31/02/1994")  # Not a real day

    def test_assessment_number_must_be_positive(self):
        with pytest.raises(OutOfRangeError):
            Assessment(number=0, date="16/10/2024")

    def test_age_must_be_non_negative(self):
        assert Age(years=0, birth_date="16/10/2024").years == 0
        with pytest.raises(OutOfRangeError):
            Age(years=-1, birth_date="16/10/2024")

    def test_measurement_must_be_positive(self):
        with pytest.raises(OutOfRangeError):
            Measurement(value=0, change=0)
        # Negative change is a legitimate delta
        assert Measurement(value=60, change=-3.2).change == -3.2

    def test_measurement_rejects_non_numbers(self):
        with pytest.raises(TypeError):
            Measurement(value="58.8", change=0)
        with pytest.raises(TypeError):
            Measurement(value=58.8, change=True)

    def test_missing_field(self):
        data = {k: v for k, v in sample_data.USER_STATS.items() if k != "height"}
        with pytest.raises(MissingFieldError, match="height"):
            UserStats.from_dict(data)

    def test_missing_nested_field(self):
        data = dict(sample_data.USER_STATS, age={"years": 17})
        with pytest.raises(MissingFieldError, match="birthDate"):
            UserStats.from_dict(data)

    def test_frozen(self):
        stats = UserStats.from_dict(sample_data.USER_STATS)
        with pytest.raises(FrozenInstanceError):
            stats.weight = Measurement(70, 0)


class TestResultData:
    """Test ResultData parsing and range checks."""

    def test_from_dict_sample(self):
        results = ResultData.from_dict(sample_data.RESULTS)
        for metric in (results.lean_mass, results.fat_mass, results.body_fat, results.bmi):
            assert metric == ResultMetric(15, 18)

    def test_no_cross_metric_invariant(self):
        # lean + fat need not add up to 100
        results = ResultData.from_dict({
            "leanMass": {"value": 80, "change": 0},
            "fatMass": {"value": 80, "change": 0},
            "bodyFat": {"value": 20, "change": 0},
            "bmi": {"value": 22, "change": 0},
        })
        assert results.lean_mass.value + results.fat_mass.value == 160

    def test_percentage_bounds(self):
        assert ResultMetric(0, 0).value == 0
        assert ResultMetric(100, 0).value == 100
        with pytest.raises(OutOfRangeError):
            ResultMetric(100.5, 0)
        with pytest.raises(OutOfRangeError):
            ResultMetric(-1, 0)

    def test_missing_metric(self):
        data = {k: v for k, v in sample_data.RESULTS.items() if k != "bmi"}
        with pytest.raises(MissingFieldError, match="bmi"):
            ResultData.from_dict(data)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            ResultMetric(150, 0)
        assert issubclass(DashboardDataError, ValueError)


class TestHistoricalData:
    """Test history series construction."""

    def test_order_preserved(self):
        records = [
            {"month": "Mar", "value": 3},
            {"month": "Jan", "value": 1},
            {"month": "Mar", "value": 5},
        ]
        history = history_from_records(records)
        assert [p.month for p in history] == ["Mar", "Jan", "Mar"]
        assert isinstance(history, tuple)

    def test_sample_series(self):
        history = history_from_records(sample_data.HISTORY)
        assert len(history) == 12
        assert history[0] == HistoricalData("Jan", 30)
        assert history[-1] == HistoricalData("Dec", 240)

    def test_empty_month_rejected(self):
        with pytest.raises(MissingFieldError):
            HistoricalData(month="  ", value=10)

    def test_missing_value(self):
        with pytest.raises(MissingFieldError):
            HistoricalData.from_dict({"month": "Jan"})

    def test_empty_series(self):
        assert history_from_records([]) == ()
