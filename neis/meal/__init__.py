"""School meal lookup against the NEIS open data API."""

from .client import MealClient, build_params, build_url, parse_document
from .config import MealConfig, load_config
from .display import DisplayContext, MealView, build_view, render_error, render_json, render_text
from .errors import InvalidDateError, MealError, NotFoundError, TransportError
from .extractor import extract_meal_data, extract_record, get_field, parse_record, to_meal_data
from .models import MealData, MealQuery, MealRecord, MealResult, NutritionPair
from .text import format_display_date, split_list, split_pair, strip_allergens, to_api_date

__all__ = [
    "MealClient",
    "build_params",
    "build_url",
    "parse_document",
    "MealConfig",
    "load_config",
    "DisplayContext",
    "MealView",
    "build_view",
    "render_text",
    "render_json",
    "render_error",
    "MealError",
    "NotFoundError",
    "InvalidDateError",
    "TransportError",
    "extract_record",
    "get_field",
    "parse_record",
    "to_meal_data",
    "extract_meal_data",
    "MealQuery",
    "MealRecord",
    "MealData",
    "NutritionPair",
    "MealResult",
    "split_list",
    "split_pair",
    "strip_allergens",
    "format_display_date",
    "to_api_date",
]
