"""
Client for the public holiday source (ArgentinaDatos).

GET {base_url}/{year} returns a JSON array of {fecha, tipo, nombre}.
Any failure, including a suspiciously short list, raises SourceUnavailable
and nothing is returned.
"""
import logging
from typing import List, Optional

import httpx  # type: ignore
from pydantic import ValidationError

from holiday_calendar.config import Settings
from holiday_calendar.exceptions import SourceUnavailable
from holiday_calendar.models.holiday import SourceHoliday

logger = logging.getLogger(__name__)


class HolidaySource:
    """Fetches one year of public holidays."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = settings.holiday_api_base_url.rstrip("/")
        self.timeout = settings.holiday_api_timeout
        self.min_holidays = settings.min_source_holidays
        self.transport = transport

    async def fetch_year(self, year: int) -> List[SourceHoliday]:
        """Holidays for `year`, sorted ascending by date."""
        url = f"{self.base_url}/{year}"
        logger.info("Fetching holidays from %s", url)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.error("Holiday source request failed: %s", e)
            raise SourceUnavailable(f"Failed to fetch holidays from API: {e}") from e

        if response.status_code != 200:
            raise SourceUnavailable(
                f"Failed to fetch holidays from API: API request failed with status {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise SourceUnavailable("Failed to fetch holidays from API: response is not JSON") from e
        if not isinstance(data, list):
            raise SourceUnavailable("Failed to fetch holidays from API: API response is not an array")

        try:
            holidays = [SourceHoliday.model_validate(item) for item in data]
        except ValidationError as e:
            raise SourceUnavailable(f"Failed to fetch holidays from API: malformed record ({e.error_count()} errors)") from e

        if len(holidays) < self.min_holidays:
            raise SourceUnavailable(
                f"Failed to fetch holidays from API: API returned only {len(holidays)} holidays, "
                f"expected at least {self.min_holidays}"
            )

        holidays.sort(key=lambda h: h.holiday_date)
        logger.info("Holiday source returned %s holidays for %s", len(holidays), year)
        for holiday in holidays:
            logger.debug("%s - %s", holiday.holiday_date, holiday.name)
        return holidays
