"""Extract meal data from a parsed mealServiceDietInfo XML document."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag

from .errors import NotFoundError
from .models import CALORIE_NOT_AVAILABLE, MealData, MealQuery, MealRecord
from .text import split_list

logger = logging.getLogger(__name__)

ROW_TAG = "row"

# Field names of the record schema
DISH_FIELD = "DDISH_NM"
CALORIE_FIELD = "CAL_INFO"
NUTRITION_FIELD = "NTR_INFO"


def get_field(record: Tag, name: str) -> str:
    """Return the text of the first ``name`` element under ``record``, or ""."""
    element = record.find(name)
    if element is None:
        return ""
    return element.get_text()


def extract_record(document: BeautifulSoup, query: MealQuery) -> Tag:
    """Return the first ``<row>`` of the response.

    Only the first row is used; additional rows are logged and ignored.

    Raises:
        NotFoundError: If the document has no rows for the query.
    """
    rows = document.find_all(ROW_TAG)
    if not rows:
        code = get_field(document, "CODE")
        api_message = get_field(document, "MESSAGE")
        logger.info(
            "급식 정보 없음: %s %s (%s)", query.school_code, query.date, code or "-"
        )
        raise NotFoundError(query=query, code=code, api_message=api_message)

    if len(rows) > 1:
        logger.warning(
            "%s %s: %d rows returned, using the first one",
            query.school_code,
            query.date,
            len(rows),
        )
    return rows[0]


def parse_record(record: Tag) -> MealRecord:
    """Read the fixed field list of a row into a MealRecord."""
    return MealRecord(
        dish_names=get_field(record, DISH_FIELD),
        calorie_info=get_field(record, CALORIE_FIELD),
        nutrition_info=get_field(record, NUTRITION_FIELD),
    )


def to_meal_data(record: MealRecord) -> MealData:
    return MealData(
        menu_items=tuple(split_list(record.dish_names)),
        calorie_text=record.calorie_info or CALORIE_NOT_AVAILABLE,
        nutrition_lines=tuple(split_list(record.nutrition_info)),
    )


def extract_meal_data(document: BeautifulSoup, query: MealQuery) -> MealData:
    """Locate the record for ``query`` and derive its MealData."""
    return to_meal_data(parse_record(extract_record(document, query)))
