"""Value objects returned by the GitHub data service.

Each result knows how to render itself; the bot's formatter only prefixes
the username.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class StreakResult:
    """A run of consecutive days with at least one contribution."""

    days: int = 0
    start: date | None = None
    end: date | None = None

    def __str__(self) -> str:
        return f"{self.days} day streak"


@dataclass(frozen=True)
class ContributionTotal:
    """All-time contribution count across every contribution year."""

    total: int = 0
    years: tuple[int, ...] = ()

    def __str__(self) -> str:
        text = f"has {self.total} total contributions"
        if self.years:
            text += f" since {min(self.years)}"
        return text


@dataclass(frozen=True)
class LanguageBytes:
    name: str
    size: int


@dataclass(frozen=True)
class LanguageBreakdown:
    """Bytes written per language, largest first."""

    languages: tuple[LanguageBytes, ...] = field(default_factory=tuple)

    @classmethod
    def from_sizes(cls, sizes: dict[str, int]) -> LanguageBreakdown:
        ordered = sorted(sizes.items(), key=lambda item: (-item[1], item[0]))
        return cls(tuple(LanguageBytes(name, size) for name, size in ordered))

    @property
    def total(self) -> int:
        return sum(lang.size for lang in self.languages)

    def __str__(self) -> str:
        if not self.languages or self.total == 0:
            return "No languages found"

        width = max(len(lang.name) for lang in self.languages)
        total = self.total
        lines = []
        for lang in self.languages:
            percent = lang.size / total * 100
            lines.append(f"{lang.name.ljust(width)}  {lang.size:>12,} bytes  {percent:5.1f}%")
        return "```\n" + "\n".join(lines) + "\n```"


@dataclass(frozen=True)
class LastRepo:
    """Most recently updated repository owned by a user.

    A result with an empty name means no qualifying repository exists.
    """

    name: str = ""
    description: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __str__(self) -> str:
        if not self.name:
            return "Could not find a repository"

        created = self.created_at.strftime("%Y-%m-%d") if self.created_at else "unknown"
        updated = self.updated_at.strftime("%Y-%m-%d") if self.updated_at else "unknown"
        return (
            f"\nThe last repo updated\n\n**{self.name}**\n\t{self.description}\n"
            f"Created At: {created}\nUpdated At: {updated}"
        )
