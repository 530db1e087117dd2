"""Mock package for test fixtures."""

from .mock_github import FakeGithubService
from .mock_platform import FakePlatform

__all__ = ["FakeGithubService", "FakePlatform"]
