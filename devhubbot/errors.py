"""Exception types raised by devhubbot components."""


class DevhubBotError(Exception):
    """Base class for all devhubbot errors."""


class ConfigurationError(DevhubBotError):
    """A setting a command needs is missing or invalid."""


class GithubServiceError(DevhubBotError):
    """The GitHub API call failed or returned errors."""


class PlatformError(DevhubBotError):
    """A chat-platform operation (send, role add/remove, channel lookup) failed."""
