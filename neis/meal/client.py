"""HTTP client for the NEIS mealServiceDietInfo endpoint."""

from __future__ import annotations

import logging
from urllib.parse import urlencode

import requests
from bs4 import BeautifulSoup

from .errors import MealError, TransportError
from .extractor import extract_meal_data
from .models import MealData, MealQuery, MealResult

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://open.neis.go.kr/hub/mealServiceDietInfo"
DEFAULT_TIMEOUT = 10.0


def build_params(query: MealQuery) -> dict[str, str]:
    return {
        "ATPT_OFCDC_SC_CODE": query.office_code,
        "SD_SCHUL_CODE": query.school_code,
        "MLSV_YMD": query.date,
    }


def build_url(base_url: str, query: MealQuery) -> str:
    """Full request URL for ``query``, as sent by MealClient."""
    return f"{base_url}?{urlencode(build_params(query))}"


def parse_document(xml_text: str | bytes) -> BeautifulSoup:
    """Parse an API response body as XML."""
    return BeautifulSoup(xml_text, "xml")


class MealClient:
    """Fetches one meal record per call from the NEIS open API.

    Each call issues a single request; nothing is cached or retried.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        if session is None:
            session = requests.Session()
            session.headers.update({"Accept": "application/xml, text/xml"})
        self._session = session

    def __enter__(self) -> MealClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def fetch_document(self, query: MealQuery) -> BeautifulSoup:
        """GET the meal service for ``query`` and parse the XML body.

        Raises:
            TransportError: On network failure or a non-success status.
        """
        logger.info("GET %s", build_url(self._base_url, query))
        try:
            response = self._session.get(
                self._base_url,
                params=build_params(query),
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.error("급식 정보 조회 실패: %s", e)
            raise TransportError() from e

        if not response.ok:
            logger.error("급식 정보 조회 실패: HTTP %d", response.status_code)
            raise TransportError(
                f"데이터를 가져오는데 실패했습니다. (HTTP {response.status_code})",
                status_code=response.status_code,
            )

        return parse_document(response.content)

    def fetch(self, query: MealQuery) -> MealData:
        """Fetch and extract the meal for ``query``.

        Raises:
            TransportError: If the request fails.
            NotFoundError: If there is no meal on that date.
        """
        return extract_meal_data(self.fetch_document(query), query)

    def lookup(self, query: MealQuery) -> MealResult:
        """Like :meth:`fetch`, but returns failures as ``MealResult.error``."""
        try:
            return MealResult(data=self.fetch(query))
        except MealError as e:
            return MealResult(error=e)
