"""
GitHub API integration for repository metadata and file contents.
Handles the REST contents API with rate limiting and authentication.
"""

import base64
import binascii
import os
import time
from datetime import datetime
from typing import Callable, List, Optional, Set

import requests
from rich.console import Console
from rich.panel import Panel

from .errors import (
    ForbiddenError,
    GitSpicefyError,
    GitHubAPIError,
    NotFoundError,
    RateLimitedError,
    UnauthorizedError,
)
from .models import GitHubFile, RepositoryInfo

console = Console()

MAX_FILE_SIZE = 100_000
MAX_RATE_LIMIT_WAIT = 60

ALLOWED_EXTENSIONS = {
    '.js', '.jsx', '.ts', '.tsx', '.py', '.java', '.cpp', '.c', '.h',
    '.css', '.scss', '.html', '.vue', '.php', '.rb', '.go', '.rs',
    '.md', '.txt', '.json', '.xml', '.yml', '.yaml', '.toml',
    '.sh', '.bat', '.ps1', '.sql', '.r', '.swift', '.kt', '.dart',
}

ALLOWED_FILES = (
    'readme', 'license', 'changelog', 'contributing', 'package.json',
    'composer.json', 'cargo.toml', 'go.mod', 'requirements.txt',
    'dockerfile', 'docker-compose.yml', '.gitignore', '.env.example',
)

SKIP_DIRECTORIES = {
    'node_modules', '.git', '.next', 'dist', 'build', 'target',
    'vendor', '__pycache__', '.vscode', '.idea', 'coverage',
    '.nyc_output', 'logs', 'tmp', 'temp', '.cache',
}


def should_process_file(file_name: str) -> bool:
    """Check a file name against the extension and name allow-lists."""
    lowered = file_name.lower()
    dot = lowered.rfind('.')
    extension = lowered[dot:] if dot != -1 else ''
    return extension in ALLOWED_EXTENSIONS or any(allowed in lowered for allowed in ALLOWED_FILES)


def should_process_directory(dir_name: str) -> bool:
    """Check a directory name against the deny-list."""
    return dir_name.lower() not in SKIP_DIRECTORIES


def _is_rate_limited(response: requests.Response) -> bool:
    if response.status_code not in (403, 429):
        return False
    if response.headers.get('x-ratelimit-remaining') == '0':
        return True
    return 'rate limit' in response.text.lower()


def _reset_time(response: requests.Response) -> Optional[datetime]:
    reset = response.headers.get('x-ratelimit-reset')
    if not reset:
        return None
    try:
        return datetime.fromtimestamp(int(reset))
    except ValueError:
        return None


class GitHubAPI:
    """GitHub API client with rate limiting and a bounded repository walk."""

    BASE_URL = "https://api.github.com"

    def __init__(self, token: Optional[str] = None, verbose: bool = False,
                 session: Optional[requests.Session] = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.token = token or os.getenv('GITHUB_TOKEN')
        self.verbose = verbose
        self.session = session or requests.Session()
        self._sleep = sleep

        self.session.headers.update({
            'Accept': 'application/vnd.github.v3+json',
            'User-Agent': 'GitSpicefy-App/1.0',
        })
        if self.token:
            self.session.headers.update({'Authorization': f'Bearer {self.token}'})
            if verbose:
                console.print("[green]🔑 Using GitHub token for higher rate limits[/green]")
        else:
            if verbose:
                console.print("[yellow]⚠️  No GitHub token - using unauthenticated requests (lower rate limits)[/yellow]")

    def _get_with_retry(self, url: str, params: Optional[dict] = None, max_retries: int = 2) -> requests.Response:
        """
        GET a URL, waiting out GitHub rate limits.

        A rate-limited response is retried after sleeping until ``x-ratelimit-reset``
        (never longer than a minute). Transport errors are retried with a short backoff.
        At most ``max_retries`` extra attempts are made.
        """
        for attempt in range(max_retries + 1):
            try:
                response = self.session.get(url, params=params)
            except requests.exceptions.RequestException as e:
                if attempt == max_retries:
                    raise GitHubAPIError(f"GitHub API request failed: {e}") from e
                self._sleep(1 * (attempt + 1))
                continue

            if _is_rate_limited(response) and attempt < max_retries:
                reset_at = _reset_time(response)
                wait = (reset_at - datetime.now()).total_seconds() if reset_at else MAX_RATE_LIMIT_WAIT
                if 0 < wait < MAX_RATE_LIMIT_WAIT:
                    console.print(f"[yellow]⏳ Rate limited, waiting {round(wait)}s before retry...[/yellow]")
                    self._sleep(wait)
                    continue

            return response

        raise GitHubAPIError("Max retries exceeded")

    def _raise_for_status(self, response: requests.Response, owner: str, repo: str) -> None:
        if response.ok:
            return

        if response.status_code == 404:
            raise NotFoundError(f"Repository '{owner}/{repo}' not found.")
        if _is_rate_limited(response):
            reset_at = _reset_time(response)
            raise RateLimitedError("GitHub API rate limit exceeded.", reset_at=reset_at)
        if response.status_code == 403:
            raise ForbiddenError(f"Access to '{owner}/{repo}' is forbidden.")
        if response.status_code == 401:
            raise UnauthorizedError("GitHub authentication failed.")
        raise GitHubAPIError(
            f"GitHub API error: {response.status_code} - {response.text}",
            status_code=response.status_code,
        )

    def _json(self, response: requests.Response, what: str):
        try:
            return response.json()
        except ValueError as e:
            raise GitHubAPIError(f"Invalid JSON in GitHub response for {what}") from e

    def get_repository_info(self, owner: str, repo: str) -> RepositoryInfo:
        """
        Get detailed information about a specific repository.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            RepositoryInfo snapshot

        Raises:
            NotFoundError, RateLimitedError, ForbiddenError, UnauthorizedError, GitHubAPIError
        """
        if self.verbose:
            console.print(f"[blue]📋 Fetching info for {owner}/{repo}[/blue]")

        url = f"{self.BASE_URL}/repos/{owner}/{repo}"
        response = self._get_with_retry(url)
        self._raise_for_status(response, owner, repo)

        data = self._json(response, f"{owner}/{repo}")
        try:
            return RepositoryInfo.from_api(data)
        except (KeyError, TypeError, AttributeError) as e:
            raise GitHubAPIError(f"Malformed repository payload for {owner}/{repo}") from e

    def list_directory(self, owner: str, repo: str, path: str = "", branch: str = "main") -> List[GitHubFile]:
        """List one directory of the repository."""
        url = f"{self.BASE_URL}/repos/{owner}/{repo}/contents/{path}"
        response = self._get_with_retry(url, params={'ref': branch})
        self._raise_for_status(response, owner, repo)

        data = self._json(response, path or "/")
        items = data if isinstance(data, list) else [data]
        try:
            return [
                GitHubFile(name=item['name'], path=item['path'], type=item['type'], size=item.get('size'))
                for item in items
            ]
        except (KeyError, TypeError, AttributeError) as e:
            raise GitHubAPIError(f"Malformed directory listing for {path or '/'}") from e

    def get_file_content(self, owner: str, repo: str, path: str, branch: str = "main") -> str:
        """Fetch and decode the content of a single file."""
        url = f"{self.BASE_URL}/repos/{owner}/{repo}/contents/{path}"
        response = self._get_with_retry(url, params={'ref': branch})
        self._raise_for_status(response, owner, repo)

        data = self._json(response, path)
        # Empty files come back with content ""
        if not isinstance(data, dict) or data.get('content') is None:
            raise GitHubAPIError(f"File content not found: {path}")
        try:
            raw = base64.b64decode(data['content'])
        except (binascii.Error, TypeError) as e:
            raise GitHubAPIError(f"Undecodable content for {path}") from e
        return raw.decode('utf-8', errors='replace')

    def get_all_files(self, owner: str, repo: str, branch: str = "main", max_files: int = 50) -> List[GitHubFile]:
        """
        Walk the repository and collect files worth analyzing.

        Directories on the deny-list are skipped. Only files that pass the allow-list and
        are smaller than 100KB get their content fetched; other files are returned
        without content so lockfiles and manifests still count as present. The walk
        stops once ``max_files`` files have content. Walked directories are returned
        as ``dir`` entries without content.

        A directory or file that cannot be read is reported and skipped, so a broken
        subtree only costs its own files.
        """
        collected: List[GitHubFile] = []
        processed: Set[str] = set()
        fetched = 0

        def process_directory(path: str = "") -> None:
            nonlocal fetched
            if fetched >= max_files:
                return

            try:
                entries = self.list_directory(owner, repo, path, branch)
            except GitSpicefyError as e:
                console.print(f"[yellow]⚠️  Error processing directory '{path or '/'}': {e}[/yellow]")
                return

            for entry in entries:
                if fetched >= max_files:
                    break
                if entry.path in processed:
                    continue
                processed.add(entry.path)

                if entry.type == 'file':
                    if not should_process_file(entry.name) or (entry.size or 0) >= MAX_FILE_SIZE:
                        collected.append(entry)
                        continue
                    try:
                        entry.content = self.get_file_content(owner, repo, entry.path, branch)
                    except GitSpicefyError as e:
                        console.print(f"[yellow]⚠️  Skipping file {entry.path}: {e}[/yellow]")
                        continue
                    collected.append(entry)
                    fetched += 1
                elif entry.type == 'dir' and should_process_directory(entry.name):
                    collected.append(entry)
                    process_directory(entry.path)

        if self.verbose:
            console.print(f"[blue]📂 Walking {owner}/{repo}@{branch} (max {max_files} files)[/blue]")

        process_directory()

        if self.verbose:
            console.print(f"[green]✅ Collected {fetched} files[/green]")

        return collected

    def check_rate_limits(self):
        """Check GitHub API rate limits and warn if low."""
        try:
            response = self.session.get(f"{self.BASE_URL}/rate_limit")
            if response.status_code == 200:
                data = response.json()
                core_limit = data['resources']['core']
                remaining = core_limit['remaining']
                reset_time = datetime.fromtimestamp(core_limit['reset'])

                if remaining < 10:
                    console.print(Panel(
                        f"[yellow]⚠️  GitHub API rate limit warning[/yellow]\n"
                        f"Remaining requests: {remaining}\n"
                        f"Reset time: {reset_time.strftime('%H:%M:%S')}\n\n"
                        f"Consider adding a GITHUB_TOKEN to your .env file for higher limits.",
                        title="Rate Limit Warning",
                        border_style="yellow"
                    ))

                if self.verbose:
                    console.print(f"[blue]📊 GitHub API: {remaining} requests remaining[/blue]")

        except (requests.exceptions.RequestException, KeyError, ValueError):
            # Don't fail if rate limit check fails
            pass
