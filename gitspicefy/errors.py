"""
Error taxonomy for README generation.
GitHub client errors are fatal to a generation request; provider errors are not.
"""

from datetime import datetime
from typing import Optional


class GitSpicefyError(Exception):
    """Base exception for all generation errors."""


class InvalidInputError(GitSpicefyError):
    """Malformed repository URL or README configuration."""


class NotFoundError(GitSpicefyError):
    """Repository absent, or private without authentication."""


class UnauthorizedError(GitSpicefyError):
    """Bad GitHub credentials."""


class ForbiddenError(GitSpicefyError):
    """Access forbidden for reasons other than rate limiting."""


class RateLimitedError(GitSpicefyError):
    """GitHub API quota exhausted."""

    def __init__(self, message: str, reset_at: Optional[datetime] = None):
        super().__init__(message)
        self.reset_at = reset_at


class GitHubAPIError(GitSpicefyError):
    """Any other non-2xx GitHub response or transport failure."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ProviderFailure(GitSpicefyError):
    """An optional AI provider adapter failed."""


class MissingAPIKeyError(ProviderFailure):
    """A provider that needs an API key was selected without one."""


class UnknownError(GitSpicefyError):
    """Catch-all for unexpected failures."""


def user_message(error: Exception) -> str:
    """Map an error to the message shown to the person who asked for the README."""
    if isinstance(error, RateLimitedError):
        reset = f" Rate limit resets at {error.reset_at.strftime('%H:%M:%S')}." if error.reset_at else ""
        return (
            f"GitHub API rate limit exceeded.{reset} Please try again later, or set GITHUB_TOKEN "
            "to a personal access token to raise the limit from 60 to 5,000 requests per hour."
        )
    if isinstance(error, InvalidInputError):
        return (
            f"{error}. Please provide a valid GitHub repository URL "
            "(e.g., https://github.com/owner/repo)."
        )
    if isinstance(error, NotFoundError):
        return f"{error} Please check the URL and ensure the repository is public."
    if isinstance(error, UnauthorizedError):
        return "Authentication failed. Please check your GitHub token."
    if isinstance(error, ForbiddenError):
        return "Access forbidden. The repository might be private or require authentication."
    if isinstance(error, GitSpicefyError):
        return str(error)
    return f"Failed to analyze repository: {error}"
