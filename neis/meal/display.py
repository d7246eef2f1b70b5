"""Build and render the meal display model."""

from __future__ import annotations

from dataclasses import dataclass, field

from .errors import MealError, NotFoundError
from .models import MealData, NutritionPair
from .text import format_display_date, split_pair, strip_allergens


@dataclass(frozen=True)
class DisplayContext:
    """Labels and options used when rendering a meal."""

    title_suffix: str = "급식 정보"
    calorie_label: str = "칼로리"
    empty_menu_text: str = "메뉴 정보가 없습니다."
    not_found_text: str = "해당 날짜의 급식 정보가 없습니다."
    error_text: str = "급식 정보를 불러오지 못했습니다. 잠시 후 다시 시도해주세요."
    strip_allergens: bool = True


@dataclass
class MealView:
    title: str
    menu_lines: list[str] = field(default_factory=list)
    nutrition: list[NutritionPair] = field(default_factory=list)


def build_view(data: MealData, iso_date: str, ctx: DisplayContext) -> MealView:
    """Turn MealData into display rows for ``iso_date``.

    Raises:
        InvalidDateError: If ``iso_date`` is not a valid date.
    """
    title = f"{format_display_date(iso_date)} {ctx.title_suffix}"

    if data.menu_items:
        if ctx.strip_allergens:
            menu_lines = [strip_allergens(item) for item in data.menu_items]
        else:
            menu_lines = [item.strip() for item in data.menu_items]
    else:
        menu_lines = [ctx.empty_menu_text]

    nutrition = [NutritionPair(label=ctx.calorie_label, value=data.calorie_text)]
    nutrition.extend(split_pair(line) for line in data.nutrition_lines)

    return MealView(title=title, menu_lines=menu_lines, nutrition=nutrition)


def render_text(view: MealView) -> str:
    """Format a MealView for terminal display."""
    lines: list[str] = []
    lines.append(f"📅 {view.title}")
    lines.append(f"{'─' * 40}")
    lines.append("🍚 메뉴")
    for item in view.menu_lines:
        lines.append(f"  • {item}")
    lines.append("")
    lines.append("📊 영양 정보")
    for pair in view.nutrition:
        lines.append(f"  {pair.label:<12} {pair.value}")
    return "\n".join(lines)


def render_json(view: MealView) -> dict:
    return {
        "title": view.title,
        "menu": list(view.menu_lines),
        "nutrition": [
            {"label": p.label, "value": p.value} for p in view.nutrition
        ],
    }


def render_error(error: MealError, ctx: DisplayContext) -> str:
    """Message shown to the user for a failed lookup."""
    if isinstance(error, NotFoundError):
        return ctx.not_found_text
    return ctx.error_text
