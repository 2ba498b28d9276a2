"""User Queries."""

from bookstore.application.users.queries.get_profile import GetProfileQuery
from bookstore.application.users.queries.get_user_stats import GetUserStatsQuery

__all__ = ["GetProfileQuery", "GetUserStatsQuery"]
