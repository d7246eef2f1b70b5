"""TOML configuration loader for the meal lookup client."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]

DEFAULT_OFFICE_CODE = "J10"
DEFAULT_SCHOOL_CODE = "7530079"


@dataclass
class APIConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT


@dataclass
class SchoolConfig:
    office_code: str = DEFAULT_OFFICE_CODE  # 시도교육청코드
    school_code: str = DEFAULT_SCHOOL_CODE  # 행정표준코드


@dataclass
class DisplayConfig:
    strip_allergens: bool = True


@dataclass
class MealConfig:
    api: APIConfig = field(default_factory=APIConfig)
    school: SchoolConfig = field(default_factory=SchoolConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


def load_config(path: str | Path | None = None) -> MealConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    School codes and the API URL can be set via environment variables
    when the file leaves them out.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    api = raw.get("api", {})
    sch = raw.get("school", {})
    dsp = raw.get("display", {})

    # Resolve values: config file → environment variable → default
    base_url = api.get("base_url", "") or os.environ.get(
        "NEIS_API_URL", ""
    ) or DEFAULT_BASE_URL
    office_code = sch.get("office_code", "") or os.environ.get(
        "NEIS_OFFICE_CODE", ""
    ) or DEFAULT_OFFICE_CODE
    school_code = sch.get("school_code", "") or os.environ.get(
        "NEIS_SCHOOL_CODE", ""
    ) or DEFAULT_SCHOOL_CODE

    return MealConfig(
        api=APIConfig(
            base_url=base_url,
            timeout=float(api.get("timeout", DEFAULT_TIMEOUT)),
        ),
        school=SchoolConfig(
            office_code=str(office_code),
            school_code=str(school_code),
        ),
        display=DisplayConfig(
            strip_allergens=dsp.get("strip_allergens", True),
        ),
    )
