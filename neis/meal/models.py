"""Data models for NEIS meal queries and extracted meal data."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidDateError, MealError

CALORIE_NOT_AVAILABLE = "정보 없음"
VALUE_NOT_AVAILABLE = "-"


@dataclass(frozen=True)
class MealQuery:
    """One school/date lookup against the meal service."""

    school_code: str
    office_code: str
    date: str  # YYYYMMDD

    def __post_init__(self) -> None:
        if len(self.date) != 8 or not self.date.isdigit():
            raise InvalidDateError(self.date)

    @classmethod
    def for_day(cls, office_code: str, school_code: str, iso_date: str) -> MealQuery:
        """Build a query from an ISO ``YYYY-MM-DD`` date."""
        from .text import to_api_date

        return cls(
            school_code=school_code,
            office_code=office_code,
            date=to_api_date(iso_date),
        )


@dataclass(frozen=True)
class MealRecord:
    """The fields read from one ``<row>`` of the API response."""

    dish_names: str = ""   # DDISH_NM
    calorie_info: str = ""  # CAL_INFO
    nutrition_info: str = ""  # NTR_INFO


@dataclass(frozen=True)
class MealData:
    """Normalized meal data ready for display."""

    menu_items: tuple[str, ...] = ()
    calorie_text: str = CALORIE_NOT_AVAILABLE
    nutrition_lines: tuple[str, ...] = ()


@dataclass(frozen=True)
class NutritionPair:
    label: str
    value: str = VALUE_NOT_AVAILABLE


@dataclass(frozen=True)
class MealResult:
    """Outcome of a lookup: either ``data`` or ``error`` is set."""

    data: MealData | None = None
    error: MealError | None = None

    def __post_init__(self) -> None:
        if (self.data is None) == (self.error is None):
            raise ValueError("MealResult needs exactly one of data or error")

    @property
    def ok(self) -> bool:
        return self.error is None
