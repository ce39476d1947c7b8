#!/usr/bin/env python3
"""
Main CLI entry point for GitSpicefy.
"""

import json
import sys
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from .analyzer import analyze_repository
from .errors import GitSpicefyError, InvalidInputError, user_message
from .generator import fetch_repository, generate
from .github_api import GitHubAPI
from .models import (
    AI_PROVIDERS,
    BADGE_STYLES,
    HEADER_ALIGNMENTS,
    LICENSE_TYPES,
    TOC_STYLES,
    ReadmeConfig,
    RepositoryAnalysis,
    RepositoryInfo,
    SectionToggles,
)

# Load environment variables from .env file
load_dotenv()

console = Console()


def load_config_file(path: str) -> dict:
    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise click.BadParameter(f"could not read {path}: {e}", param_hint='--config')
    if not isinstance(data, dict):
        raise click.BadParameter(f"{path} must contain a JSON object", param_hint='--config')
    return data


def build_config(config_file=None, enable=(), disable=(), **options) -> ReadmeConfig:
    """
    Build a ReadmeConfig from an optional JSON file plus command-line overrides.

    Options left as None keep the file's value (or the default); --enable and
    --disable are applied last.
    """
    data = load_config_file(config_file) if config_file else {}
    data.update({key: value for key, value in options.items() if value is not None})

    try:
        config = ReadmeConfig.from_dict(data)
    except (InvalidInputError, TypeError) as e:
        raise click.BadParameter(str(e), param_hint='--config')

    for section in enable:
        setattr(config.sections, section, True)
    for section in disable:
        setattr(config.sections, section, False)
    return config


def repository_panel(repo_info: RepositoryInfo, file_count: int) -> Panel:
    info_text = f"[green]Repository:[/green] {repo_info.full_name}\n"
    info_text += f"[blue]URL:[/blue] {repo_info.html_url}\n"
    if repo_info.description:
        info_text += f"[blue]Description:[/blue] {repo_info.description}\n"
    info_text += f"[blue]Language:[/blue] {repo_info.language}\n"
    info_text += f"[blue]Stars:[/blue] {repo_info.stars:,}  [blue]Forks:[/blue] {repo_info.forks:,}\n"
    info_text += f"[blue]Branch:[/blue] {repo_info.default_branch}\n"
    info_text += f"[blue]Files analyzed:[/blue] {file_count}"
    return Panel(info_text, title="Repository Discovery", border_style="green")


def analysis_table(analysis: RepositoryAnalysis) -> Table:
    table = Table(title="Repository Analysis")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")

    def yes_no(flag: bool) -> str:
        return "[green]yes[/green]" if flag else "[dim]no[/dim]"

    table.add_row("Project type", analysis.project_type)
    table.add_row("Language", analysis.main_language)
    table.add_row("Package manager", analysis.package_manager)
    table.add_row("Build tool", analysis.build_tool or "-")
    table.add_row("Frameworks", ", ".join(analysis.frameworks) or "-")
    table.add_row("Features", ", ".join(analysis.features) or "-")
    table.add_row("Directories", ", ".join(analysis.structure[:10]) or "-")
    table.add_row("Scripts", ", ".join(analysis.scripts) or "-")
    table.add_row("Tests", yes_no(analysis.has_tests))
    table.add_row("Documentation", yes_no(analysis.has_documentation))
    table.add_row("CI", yes_no(analysis.has_ci))
    table.add_row("Docker", yes_no(analysis.has_docker))
    return table


@click.command()
@click.argument('repo_url', required=True)
@click.option('--output', '-o', default='README.md', show_default=True,
              help='File to write the README to ("-" for stdout)')
@click.option('--basic', is_flag=True, help='Use the fixed basic layout instead of the configurable one')
@click.option('--config', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='JSON file with README options (camelCase or snake_case keys)')
@click.option('--provider', type=click.Choice(AI_PROVIDERS), help='Generation provider (default: local)')
@click.option('--model', help='Model name for the selected provider')
@click.option('--align', type=click.Choice(HEADER_ALIGNMENTS), help='Header alignment')
@click.option('--toc-style', type=click.Choice(TOC_STYLES), help='Table of contents style')
@click.option('--badge-style', type=click.Choice(BADGE_STYLES), help='shields.io badge style')
@click.option('--license', 'license_type', type=click.Choice(LICENSE_TYPES), help='License named in the README')
@click.option('--logo/--no-logo', default=None, help='Embed a generated SVG logo')
@click.option('--emojis/--no-emojis', default=None, help='Prefix headings with emojis')
@click.option('--enable', multiple=True, type=click.Choice(SectionToggles.names()), help='Enable a section (repeatable)')
@click.option('--disable', multiple=True, type=click.Choice(SectionToggles.names()), help='Disable a section (repeatable)')
@click.option('--feature', 'features', multiple=True, help='Custom feature bullet (repeatable)')
@click.option('--tech', multiple=True, help='Custom tech stack entry (repeatable)')
@click.option('--description', help='Project description to use instead of the repository one')
@click.option('--prompt', help='Additional instructions for AI providers')
@click.option('--max-files', default=50, show_default=True, type=click.IntRange(min=1),
              help='Maximum number of files to fetch')
@click.option('--token', help='GitHub token (default: GITHUB_TOKEN)')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--dry-run', is_flag=True, help='Fetch and analyze the repository without writing a README')
@click.version_option()
def cli(repo_url, output, basic, config_file, provider, model, align, toc_style, badge_style, license_type,
        logo, emojis, enable, disable, features, tech, description, prompt, max_files, token, verbose, dry_run):
    """
    Generate a README.md for a public GitHub repository.

    REPO_URL: GitHub repository URL (https://github.com/owner/repo)

    Examples:
      gitspicefy https://github.com/pallets/flask
      gitspicefy https://github.com/vercel/next.js --provider openai -o docs/README.md
      gitspicefy https://github.com/owner/repo --basic -o -
    """
    config = None
    if not basic:
        config = build_config(
            config_file,
            enable=enable,
            disable=disable,
            ai_provider=provider,
            ai_model=model,
            header_alignment=align,
            table_of_contents_style=toc_style,
            badge_style=badge_style,
            license_type=license_type,
            generate_logo=logo,
            add_emojis_to_headings=emojis,
            custom_features=list(features) or None,
            custom_tech_stack=list(tech) or None,
            project_description=description,
            custom_prompt=prompt,
        )

    to_stdout = output == '-'

    if verbose:
        mode = "basic" if config is None else f"{config.ai_provider} ({config.ai_model})"
        sections = "fixed layout" if config is None else ", ".join(config.sections.enabled())
        console.print(Panel(
            f"Repository: {repo_url}\n"
            f"Mode: {mode}\n"
            f"Sections: {sections}\n"
            f"Max files: {max_files}\n"
            f"Output: {'stdout' if to_stdout else output}\n"
            f"Dry run: {dry_run}",
            title="Configuration",
            border_style="blue"
        ))

    github = GitHubAPI(token=token, verbose=verbose)

    try:
        if verbose:
            github.check_rate_limits()

        if dry_run:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
                transient=True,
            ) as progress:
                progress.add_task("Fetching repository...", total=None)
                repo_info, files = fetch_repository(repo_url, github=github, max_files=max_files)

            console.print(repository_panel(repo_info, sum(1 for f in files if f.content is not None)))
            console.print(analysis_table(analyze_repository(repo_info, files)))
            console.print("[blue]ℹ️  This was a dry run - no README written[/blue]")
            return

        result = generate(repo_url, config=config, github=github, max_files=max_files, verbose=verbose)

        if to_stdout:
            click.echo(result.readme, nl=False)
            return

        path = Path(output)
        if path.parent != Path('.'):
            path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(result.readme, encoding='utf-8')

        console.print(Panel(
            f"[green]🎉 README generated for {result.repository.full_name}![/green]\n"
            f"Written to: {path}\n"
            f"Size: {len(result.readme):,} chars from {sum(1 for f in result.files if f.content is not None)} files",
            title="Task Complete",
            border_style="green"
        ))

    except GitSpicefyError as e:
        console.print(Panel(
            f"[red]{user_message(e)}[/red]",
            title=type(e).__name__,
            border_style="red"
        ))
        if verbose:
            console.print_exception()
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]❌ Operation cancelled by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(Panel(
            f"[red]Unexpected error:[/red] {user_message(e)}",
            title="Error",
            border_style="red"
        ))
        if verbose:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    cli()
