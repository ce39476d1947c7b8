"""
README generation pipeline: URL -> repository metadata -> files -> README.
"""

from typing import List, Optional, Sequence, Tuple

from rich.console import Console

from .analyzer import analyze_repository
from .errors import GitSpicefyError, UnknownError
from .github_api import GitHubAPI
from .models import GenerationResult, GitHubFile, ReadmeConfig, RepositoryInfo
from .providers import ProviderResult, TemplateProvider, build_provider_chain
from .repository import parse_github_url
from .templates import render_basic_readme

console = Console()


def generate_enhanced_readme(repo_info: RepositoryInfo, files: List[GitHubFile], config: ReadmeConfig,
                             providers: Optional[Sequence] = None, verbose: bool = False) -> str:
    """
    Generate a README by walking the provider chain.

    Each provider is tried in order and the first non-empty result wins. A provider
    that raises is reported and skipped; AI failures never reach the caller.

    Args:
        repo_info: Repository metadata
        files: Files fetched from the repository
        config: README configuration
        providers: Provider chain override (defaults to build_provider_chain(config))
        verbose: Print provider progress

    Returns:
        Markdown README
    """
    chain = list(providers) if providers is not None else build_provider_chain(config, verbose=verbose)

    for provider in chain:
        name = getattr(provider, 'name', type(provider).__name__)
        try:
            result = provider.generate(repo_info, files, config)
        except Exception as e:
            result = ProviderResult(name, error=str(e))
            console.print(f"[yellow]⚠️  {name} generation failed, falling back: {e}[/yellow]")
            if verbose:
                console.print_exception()

        if result.ok:
            if verbose:
                console.print(f"[green]✅ README generated by {result.provider}[/green]")
            return result.content

        if verbose and not result.error:
            console.print(f"[yellow]⚠️  {name} returned an empty README, trying next provider[/yellow]")

    # A custom chain may lack the template provider
    return TemplateProvider().generate(repo_info, files, config).content


def generate_basic_readme(repo_info: RepositoryInfo, files: List[GitHubFile]) -> str:
    """Generate the fixed-layout README used when no configuration is given."""
    analysis = analyze_repository(repo_info, files)
    return render_basic_readme(repo_info, analysis)


def fetch_repository(repo_url: str, github: Optional[GitHubAPI] = None,
                     max_files: int = 50) -> Tuple[RepositoryInfo, List[GitHubFile]]:
    """
    Validate a repository URL and fetch its metadata and files.

    Raises:
        InvalidInputError: Before any network call, if the URL is not a GitHub repository URL
        NotFoundError, RateLimitedError, ForbiddenError, UnauthorizedError, GitHubAPIError
    """
    owner, repo = parse_github_url(repo_url)
    github = github or GitHubAPI()

    repo_info = github.get_repository_info(owner, repo)
    files = github.get_all_files(owner, repo, branch=repo_info.default_branch, max_files=max_files)
    return repo_info, files


def generate(repo_url: str, config: Optional[ReadmeConfig] = None, github: Optional[GitHubAPI] = None,
             max_files: int = 50, verbose: bool = False) -> GenerationResult:
    """
    Generate a README for a public GitHub repository.

    With a config the provider chain renders a configurable README; without one
    the basic fixed layout is used. Typed errors propagate to the caller; anything
    else is raised as UnknownError.
    """
    try:
        repo_info, files = fetch_repository(repo_url, github=github, max_files=max_files)

        if config is not None:
            readme = generate_enhanced_readme(repo_info, files, config, verbose=verbose)
        else:
            readme = generate_basic_readme(repo_info, files)
    except GitSpicefyError:
        raise
    except Exception as e:
        raise UnknownError(f"Unexpected error while generating README: {e}") from e

    return GenerationResult(readme=readme, repository=repo_info, files=files)
