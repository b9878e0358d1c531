"""Visit analysis endpoints: portraits, distributions, pages, summaries, retention and trends."""

from __future__ import annotations

from typing import Any, Dict

from .core import Requester

API_GET_USER_PORTRAIT = "/datacube/getweanalysisappiduserportrait"
API_GET_VISIT_DISTRIBUTION = "/datacube/getweanalysisappidvisitdistribution"
API_GET_VISIT_PAGE = "/datacube/getweanalysisappidvisitpage"
API_GET_DAILY_SUMMARY = "/datacube/getweanalysisappiddailysummarytrend"

API_GET_MONTHLY_RETAIN = "/datacube/getweanalysisappidmonthlyretaininfo"
API_GET_WEEKLY_RETAIN = "/datacube/getweanalysisappidweeklyretaininfo"
API_GET_DAILY_RETAIN = "/datacube/getweanalysisappiddailyretaininfo"

API_GET_MONTHLY_VISIT_TREND = "/datacube/getweanalysisappidmonthlyvisittrend"
API_GET_WEEKLY_VISIT_TREND = "/datacube/getweanalysisappidweeklyvisittrend"
API_GET_DAILY_VISIT_TREND = "/datacube/getweanalysisappiddailyvisittrend"


class Analysis:
    """Data analysis queries over a date range given as ``yyyymmdd`` strings."""

    def __init__(self, requester: Requester) -> None:
        self.requester = requester

    def _query(self, path: str, begin: str, end: str) -> Dict[str, Any]:
        url = self.requester.combine_uri(path, None, True)
        return self.requester.post(url, {"begin_date": begin, "end_date": end})

    def get_user_portrait(self, begin: str, end: str) -> Dict[str, Any]:
        """Portraits of new and active users (``visit_uv``, ``visit_uv_new``).

        The range must span 0, 6 or 29 days and end no later than yesterday.
        """
        return self._query(API_GET_USER_PORTRAIT, begin, end)

    def get_visit_distribution(self, begin: str, end: str) -> Dict[str, Any]:
        """Distribution of visits by source, stay time and depth for one day."""
        return self._query(API_GET_VISIT_DISTRIBUTION, begin, end)

    def get_visit_page(self, begin: str, end: str) -> Dict[str, Any]:
        """Top 200 visited pages by ``page_visit_pv`` for one day."""
        return self._query(API_GET_VISIT_PAGE, begin, end)

    def get_daily_summary(self, begin: str, end: str) -> Dict[str, Any]:
        """Overview of user visits for one day."""
        return self._query(API_GET_DAILY_SUMMARY, begin, end)

    def get_monthly_retain(self, begin: str, end: str) -> Dict[str, Any]:
        """Monthly retention; ``begin`` and ``end`` bound one natural month."""
        return self._query(API_GET_MONTHLY_RETAIN, begin, end)

    def get_weekly_retain(self, begin: str, end: str) -> Dict[str, Any]:
        """Weekly retention; ``end`` is a Sunday and the range covers one week."""
        return self._query(API_GET_WEEKLY_RETAIN, begin, end)

    def get_daily_retain(self, begin: str, end: str) -> Dict[str, Any]:
        """Daily retention for one day, no later than yesterday."""
        return self._query(API_GET_DAILY_RETAIN, begin, end)

    def get_monthly_visit_trend(self, begin: str, end: str) -> Dict[str, Any]:
        """Monthly visit trend; the range covers one natural month."""
        return self._query(API_GET_MONTHLY_VISIT_TREND, begin, end)

    def get_weekly_visit_trend(self, begin: str, end: str) -> Dict[str, Any]:
        """Weekly visit trend; ``end`` is a Sunday and the range covers one week."""
        return self._query(API_GET_WEEKLY_VISIT_TREND, begin, end)

    def get_daily_visit_trend(self, begin: str, end: str) -> Dict[str, Any]:
        """Daily visit trend for one day, no later than yesterday."""
        return self._query(API_GET_DAILY_VISIT_TREND, begin, end)