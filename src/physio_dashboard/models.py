"""
Data model for the physical assessment dashboard.

Three records describe everything the page displays:
- UserStats: one assessment event (number/date, age, weight, height)
- ResultData: four pre-computed body-composition percentages
- HistoricalData: one (month, value) point of the 12-month history

All records are frozen. Each offers `from_dict()` accepting the camelCase
literal shape the dataset is written in, and validates on construction.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Mapping

from physio_dashboard.formatting import parse_date

# =============================================================================
# Errors
# =============================================================================


class DashboardDataError(ValueError):
    """Base class for invalid dashboard data."""


class MalformedDateError(DashboardDataError):
    """A date that is not a real DD/MM/YYYY calendar date."""


class OutOfRangeError(DashboardDataError):
    """A numeric value outside its allowed range."""


class MissingFieldError(DashboardDataError):
    """A required field absent from a literal mapping."""


# =============================================================================
# Validation Helpers
# =============================================================================


def _require(mapping: Mapping[str, Any], key: str, where: str) -> Any:
    if not isinstance(mapping, Mapping):
        raise TypeError(f"{where}: expected a mapping, got {type(mapping).__name__}")
    if key not in mapping or mapping[key] is None:
        raise MissingFieldError(f"{where}: missing required field '{key}'")
    return mapping[key]


def _check_number(value: Any, name: str) -> float:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value).__name__}")
    if isinstance(value, float) and not math.isfinite(value):
        raise OutOfRangeError(f"{name} must be finite, got {value}")
    return value


def _check_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def _coerce_date(value: Any, name: str) -> date:
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return parse_date(value)
        except ValueError as e:
            raise MalformedDateError(f"{name}: '{value}' is not a DD/MM/YYYY date") from e
    raise MalformedDateError(f"{name}: expected a date or DD/MM/YYYY string, got {type(value).__name__}")


# =============================================================================
# UserStats
# =============================================================================


@dataclass(frozen=True)
class Assessment:
    number: int
    date: date

    def __post_init__(self):
        _check_int(self.number, "assessment.number")
        if self.number <= 0:
            raise OutOfRangeError(f"assessment.number must be positive, got {self.number}")
        object.__setattr__(self, "date", _coerce_date(self.date, "assessment.date"))


@dataclass(frozen=True)
class Age:
    years: int
    birth_date: date

    def __post_init__(self):
        _check_int(self.years, "age.years")
        if self.years < 0:
            raise OutOfRangeError(f"age.years must be non-negative, got {self.years}")
        object.__setattr__(self, "birth_date", _coerce_date(self.birth_date, "age.birth_date"))


@dataclass(frozen=True)
class Measurement:
    """A positive physical measurement and its delta vs. the prior assessment."""
    value: float
    change: float = 0

    def __post_init__(self):
        _check_number(self.value, "measurement.value")
        _check_number(self.change, "measurement.change")
        if self.value <= 0:
            raise OutOfRangeError(f"measurement.value must be positive, got {self.value}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], where: str = "measurement") -> "Measurement":
        return cls(
            value=_require(data, "value", where),
            change=_require(data, "change", where),
        )


@dataclass(frozen=True)
class UserStats:
    """Stats for one assessment event: weight in kg, height in metres."""
    assessment: Assessment
    age: Age
    weight: Measurement
    height: Measurement

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserStats":
        assessment = _require(data, "assessment", "userStats")
        age = _require(data, "age", "userStats")
        return cls(
            assessment=Assessment(
                number=_require(assessment, "number", "userStats.assessment"),
                date=_require(assessment, "date", "userStats.assessment"),
            ),
            age=Age(
                years=_require(age, "years", "userStats.age"),
                birth_date=_require(age, "birthDate", "userStats.age"),
            ),
            weight=Measurement.from_dict(_require(data, "weight", "userStats"), "userStats.weight"),
            height=Measurement.from_dict(_require(data, "height", "userStats"), "userStats.height"),
        )


# =============================================================================
# ResultData
# =============================================================================


@dataclass(frozen=True)
class ResultMetric:
    """A body-composition percentage (0-100) and its period-over-period delta."""
    value: float
    change: float

    def __post_init__(self):
        _check_number(self.value, "result.value")
        _check_number(self.change, "result.change")
        if not 0 <= self.value <= 100:
            raise OutOfRangeError(f"result.value must be within [0, 100], got {self.value}")


# (attribute, literal key) in display order
RESULT_FIELDS: tuple[tuple[str, str], ...] = (
    ("lean_mass", "leanMass"),
    ("fat_mass", "fatMass"),
    ("body_fat", "bodyFat"),
    ("bmi", "bmi"),
)


@dataclass(frozen=True)
class ResultData:
    lean_mass: ResultMetric
    fat_mass: ResultMetric
    body_fat: ResultMetric
    bmi: ResultMetric

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResultData":
        kwargs = {}
        for attr, key in RESULT_FIELDS:
            metric = _require(data, key, "results")
            kwargs[attr] = ResultMetric(
                value=_require(metric, "value", f"results.{key}"),
                change=_require(metric, "change", f"results.{key}"),
            )
        return cls(**kwargs)


# =============================================================================
# HistoricalData
# =============================================================================


@dataclass(frozen=True)
class HistoricalData:
    """One point of the history series."""
    month: str
    value: float

    def __post_init__(self):
        if not isinstance(self.month, str) or not self.month.strip():
            raise MissingFieldError("history.month must be a non-empty label")
        _check_number(self.value, "history.value")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HistoricalData":
        return cls(
            month=_require(data, "month", "history"),
            value=_require(data, "value", "history"),
        )


def history_from_records(records: Iterable[Mapping[str, Any]]) -> tuple[HistoricalData, ...]:
    """Build an immutable history series, keeping the given order."""
    return tuple(HistoricalData.from_dict(record) for record in records)
