from datetime import datetime

from gitspicefy.errors import (
    ForbiddenError,
    GitHubAPIError,
    InvalidInputError,
    MissingAPIKeyError,
    NotFoundError,
    ProviderFailure,
    RateLimitedError,
    UnauthorizedError,
    user_message,
)


def test_rate_limit_message_mentions_reset_and_token():
    error = RateLimitedError("limit", reset_at=datetime(2024, 1, 1, 13, 5, 9))
    message = user_message(error)
    assert 'resets at 13:05:09' in message
    assert 'GITHUB_TOKEN' in message


def test_messages():
    assert 'https://github.com/owner/repo' in user_message(InvalidInputError("Invalid GitHub repository URL"))
    assert 'ensure the repository is public' in user_message(NotFoundError("Repository 'a/b' not found."))
    assert user_message(UnauthorizedError("bad")) == "Authentication failed. Please check your GitHub token."
    assert 'forbidden' in user_message(ForbiddenError("no")).lower()
    assert user_message(GitHubAPIError("GitHub API error: 500", status_code=500)) == "GitHub API error: 500"
    assert user_message(ValueError("odd")) == "Failed to analyze repository: odd"


def test_missing_key_is_a_provider_failure():
    assert issubclass(MissingAPIKeyError, ProviderFailure)
