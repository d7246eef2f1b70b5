"""Error types raised while looking up school meals."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import MealQuery


class MealError(Exception):
    """Base class for meal lookup failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class NotFoundError(MealError):
    """No meal record exists for the requested school and date.

    Attributes:
        query: the query that produced no rows
        code: API result code, e.g. ``INFO-200``
        api_message: API result message
    """

    def __init__(
        self,
        message: str = "해당 날짜의 급식 정보가 없습니다.",
        query: MealQuery | None = None,
        code: str = "",
        api_message: str = "",
    ) -> None:
        super().__init__(message)
        self.query = query
        self.code = code
        self.api_message = api_message


class InvalidDateError(MealError, ValueError):
    """A date string could not be parsed as a calendar date."""

    def __init__(self, value: str) -> None:
        super().__init__(f"올바른 날짜가 아닙니다: {value!r}")
        self.value = value


class TransportError(MealError):
    """The HTTP request failed or returned a non-success status."""

    def __init__(
        self,
        message: str = "데이터를 가져오는데 실패했습니다.",
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
