"""
Reporting API controllers.
"""

from ssr_connect.reports.api.reports import AdminReportController
from ssr_connect.reports.api.reports import MentorStatsController

__all__ = ["AdminReportController", "MentorStatsController"]
