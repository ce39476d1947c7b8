"""
GitHub repository URL validation and parsing.
Every URL is checked here before any network call is made.
"""

import re
from typing import Tuple

from .errors import InvalidInputError


# GitHub URL pattern: https://github.com/owner/repo with optional trailing path; scheme and host are case-insensitive
GITHUB_URL_PATTERN = re.compile(
    r'^(?i:https?://github\.com)/([a-zA-Z0-9._-]+)/([a-zA-Z0-9._-]+)(?:/.*)?$'
)

NAME_PATTERN = re.compile(r'^[a-zA-Z0-9._-]+$')


def _clean(url: str) -> str:
    cleaned = url.strip()
    cleaned = re.split(r'[?#]', cleaned, maxsplit=1)[0]
    return cleaned.rstrip('/')


def is_valid_github_url(url) -> bool:
    """Return True for https://github.com/<owner>/<repo> URLs."""
    if not url or not isinstance(url, str):
        return False

    match = GITHUB_URL_PATTERN.match(_clean(url))
    if not match:
        return False

    owner, repo = match.groups()
    # Reject names made only of dots (".", "..")
    return bool(owner.strip('.')) and bool(repo.strip('.'))


def parse_github_url(url: str) -> Tuple[str, str]:
    """
    Extract (owner, repo) from a GitHub repository URL.

    Raises:
        InvalidInputError: If the URL is not a GitHub repository URL
    """
    if not is_valid_github_url(url):
        raise InvalidInputError(f"Invalid GitHub URL: {url!r}")

    owner, repo = GITHUB_URL_PATTERN.match(_clean(url)).groups()
    if repo.endswith('.git'):
        repo = repo[:-len('.git')]
    if not NAME_PATTERN.match(repo):
        raise InvalidInputError(f"Invalid repository name in URL: {url!r}")
    return owner, repo


def normalize_github_url(url: str) -> str:
    """Normalize a GitHub URL to https://github.com/owner/repo."""
    owner, repo = parse_github_url(url)
    return f"https://github.com/{owner}/{repo}"
