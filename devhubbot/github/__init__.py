"""GitHub data service and the value objects it returns."""

from devhubbot.github.models import (
    ContributionTotal,
    LanguageBreakdown,
    LanguageBytes,
    LastRepo,
    StreakResult,
)
from devhubbot.github.service import GithubDataService, GithubService

__all__ = [
    "ContributionTotal",
    "GithubDataService",
    "GithubService",
    "LanguageBreakdown",
    "LanguageBytes",
    "LastRepo",
    "StreakResult",
]
