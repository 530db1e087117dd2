"""GitHub GraphQL data service.

Fetches contribution calendars, language sizes and repositories for a user
and reduces them to the value objects in devhubbot.github.models.
"""

from __future__ import annotations

import asyncio
from datetime import date, datetime, timezone
from typing import Any, Callable, Protocol

import httpx
from loguru import logger

from devhubbot.config.settings import GithubSettings
from devhubbot.errors import GithubServiceError
from devhubbot.github.models import (
    ContributionTotal,
    LanguageBreakdown,
    LastRepo,
    StreakResult,
)

CONTRIBUTION_YEARS_QUERY = """
query($username: String!) {
  user(login: $username) {
    contributionsCollection { contributionYears }
  }
}
"""

CONTRIBUTION_CALENDAR_QUERY = """
query($username: String!, $from: DateTime!, $to: DateTime!) {
  user(login: $username) {
    contributionsCollection(from: $from, to: $to) {
      contributionCalendar {
        totalContributions
        weeks { contributionDays { date contributionCount } }
      }
    }
  }
}
"""

LANGUAGES_QUERY = """
query($username: String!) {
  user(login: $username) {
    repositories(first: 100, ownerAffiliations: OWNER, isFork: false) {
      nodes {
        languages(first: 20, orderBy: {field: SIZE, direction: DESC}) {
          edges { size node { name } }
        }
      }
    }
  }
}
"""

LAST_REPO_QUERY = """
query($username: String!) {
  user(login: $username) {
    repositories(first: 1, ownerAffiliations: OWNER, isFork: false,
                 orderBy: {field: UPDATED_AT, direction: DESC}) {
      nodes { name description createdAt updatedAt }
    }
  }
}
"""

ContributionDay = tuple[date, int]


class GithubDataService(Protocol):
    """Operations the bot's command handlers consume."""

    async def get_current_contribution_streak(self, username: str) -> StreakResult: ...

    async def get_longest_contribution_streak(self, username: str) -> StreakResult: ...

    async def get_total_contributions(self, username: str) -> ContributionTotal: ...

    async def get_languages(self, username: str) -> LanguageBreakdown: ...

    async def get_last_repo(self, username: str) -> LastRepo: ...


def current_streak(days: list[ContributionDay], today: date) -> StreakResult:
    """Consecutive contribution days ending today, or yesterday if today is still empty."""
    past = [d for d in sorted(days) if d[0] <= today]
    if past and past[-1][0] == today and past[-1][1] == 0:
        past.pop()

    count = 0
    start = end = None
    for day, contributions in reversed(past):
        if contributions == 0:
            break
        # Gap in the calendar, or the run ended before yesterday.
        if ((start or today) - day).days > 1:
            break
        count += 1
        start = day
        end = end or day
    return StreakResult(count, start, end)


def longest_streak(days: list[ContributionDay]) -> StreakResult:
    """Longest run of consecutive contribution days."""
    best = StreakResult()
    count = 0
    start = prev = None
    for day, contributions in sorted(days):
        if contributions == 0:
            count, start = 0, None
        elif start is not None and prev is not None and (day - prev).days == 1:
            count += 1
        else:
            count, start = 1, day
        if count > best.days:
            best = StreakResult(count, start, day)
        prev = day
    return best


def _parse_datetime(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class GithubService:
    """GraphQL client for the GitHub v4 API.

    Args:
        settings: API url and token
        client: Optional preconfigured httpx client (used by tests)
        today: Clock used for the current streak

    Example:
        >>> async with GithubService(settings.github) as github:
        ...     streak = await github.get_current_contribution_streak("octocat")
    """

    def __init__(
        self,
        settings: GithubSettings,
        client: httpx.AsyncClient | None = None,
        today: Callable[[], date] | None = None,
    ):
        self.settings = settings
        self._owns_client = client is None
        if client is None:
            headers = {"Authorization": f"Bearer {settings.token}"} if settings.token else {}
            client = httpx.AsyncClient(headers=headers, timeout=30.0)
        self.client = client
        self._today = today or (lambda: datetime.now(timezone.utc).date())

    async def __aenter__(self) -> GithubService:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def _query(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        """Run a query and return its ``data`` object."""
        try:
            response = await self.client.post(
                self.settings.graphql_url, json={"query": query, "variables": variables}
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            raise GithubServiceError(f"github client query: {e}") from e
        except ValueError as e:
            raise GithubServiceError(f"github client query: invalid json: {e}") from e

        if payload.get("errors"):
            messages = "; ".join(err.get("message", "unknown") for err in payload["errors"])
            raise GithubServiceError(f"github client query: {messages}")
        return payload.get("data") or {}

    async def _user(self, query: str, username: str, **variables: Any) -> dict[str, Any]:
        data = await self._query(query, {"username": username, **variables})
        user = data.get("user")
        if user is None:
            raise GithubServiceError(f"github user {username} not found")
        return user

    async def _contribution_years(self, username: str) -> list[int]:
        user = await self._user(CONTRIBUTION_YEARS_QUERY, username)
        return list(user["contributionsCollection"]["contributionYears"])

    async def _calendar(self, username: str, year: int) -> tuple[int, list[ContributionDay]]:
        user = await self._user(
            CONTRIBUTION_CALENDAR_QUERY,
            username,
            **{"from": f"{year}-01-01T00:00:00Z", "to": f"{year}-12-31T23:59:59Z"},
        )
        calendar = user["contributionsCollection"]["contributionCalendar"]
        days = [
            (date.fromisoformat(d["date"]), d["contributionCount"])
            for week in calendar["weeks"]
            for d in week["contributionDays"]
        ]
        return calendar["totalContributions"], days

    async def _all_calendars(self, username: str) -> tuple[list[int], list[tuple[int, list[ContributionDay]]]]:
        years = await self._contribution_years(username)
        calendars = await asyncio.gather(*(self._calendar(username, y) for y in years))
        logger.debug("Fetched {} contribution years for {}", len(years), username)
        return years, list(calendars)

    async def _all_days(self, username: str) -> list[ContributionDay]:
        _, calendars = await self._all_calendars(username)
        return [day for _, days in calendars for day in days]

    async def get_current_contribution_streak(self, username: str) -> StreakResult:
        return current_streak(await self._all_days(username), self._today())

    async def get_longest_contribution_streak(self, username: str) -> StreakResult:
        return longest_streak(await self._all_days(username))

    async def get_total_contributions(self, username: str) -> ContributionTotal:
        years, calendars = await self._all_calendars(username)
        return ContributionTotal(sum(total for total, _ in calendars), tuple(years))

    async def get_languages(self, username: str) -> LanguageBreakdown:
        user = await self._user(LANGUAGES_QUERY, username)
        sizes: dict[str, int] = {}
        for repo in user["repositories"]["nodes"] or []:
            for edge in repo["languages"]["edges"] or []:
                name = edge["node"]["name"]
                sizes[name] = sizes.get(name, 0) + edge["size"]
        return LanguageBreakdown.from_sizes(sizes)

    async def get_last_repo(self, username: str) -> LastRepo:
        user = await self._user(LAST_REPO_QUERY, username)
        nodes = user["repositories"]["nodes"] or []
        if not nodes:
            return LastRepo()
        node = nodes[0]
        return LastRepo(
            name=node.get("name") or "",
            description=node.get("description") or "",
            created_at=_parse_datetime(node.get("createdAt")),
            updated_at=_parse_datetime(node.get("updatedAt")),
        )
