"""
README providers: the local template engine, Hugging Face inference and OpenAI.

Every provider exposes ``generate(repo_info, files, config) -> ProviderResult``.
Remote adapters may raise; the orchestration in generator.py turns any such
failure into a failed result and moves on to the next provider in the chain.
"""

import os
from dataclasses import dataclass
from typing import List, Optional

import openai
import requests
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from .analyzer import analyze_repository
from .errors import MissingAPIKeyError, ProviderFailure
from .models import GitHubFile, ReadmeConfig, RepositoryInfo
from .templates import render_fallback_readme, render_readme

console = Console()

DEFAULT_OPENAI_MODEL = 'gpt-4'
OPENAI_MODEL_PREFIXES = ('gpt-', 'chatgpt-', 'o1', 'o3', 'o4')

SYSTEM_PROMPT = (
    "You are an expert technical writer specializing in creating comprehensive, professional "
    "README files for software projects. Generate detailed, well-structured documentation "
    "that follows best practices."
)


@dataclass
class ProviderResult:
    """Outcome of one provider attempt."""
    provider: str
    content: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return bool(self.content and self.content.strip())


def _file_paths(files: List[GitHubFile], limit: int) -> List[str]:
    return [f.path for f in files if f.type == 'file'][:limit]


class LocalProvider:
    """Heuristic analysis rendered through the template engine; no model is called."""

    name = 'local'

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def generate(self, repo_info: RepositoryInfo, files: List[GitHubFile], config: ReadmeConfig) -> ProviderResult:
        analysis = analyze_repository(repo_info, files)
        if self.verbose:
            console.print(f"[blue]🧠 Detected {analysis.project_type} ({analysis.package_manager})[/blue]")
        return ProviderResult(self.name, render_readme(repo_info, analysis, config))


class TemplateProvider:
    """Deterministic last resort at the end of every provider chain."""

    name = 'template'

    def generate(self, repo_info: RepositoryInfo, files: List[GitHubFile], config: ReadmeConfig) -> ProviderResult:
        analysis = analyze_repository(repo_info, files)
        return ProviderResult(self.name, render_readme(repo_info, analysis, config))


class HuggingFaceProvider:
    """Free Hugging Face inference models, tried in order."""

    name = 'huggingface'
    BASE_URL = "https://api-inference.huggingface.co/models"
    MODELS = (
        'microsoft/DialoGPT-medium',
        'facebook/blenderbot-400M-distill',
        'microsoft/DialoGPT-small',
    )
    MIN_RESPONSE_LENGTH = 100

    def __init__(self, api_key: Optional[str] = None, session: Optional[requests.Session] = None,
                 verbose: bool = False):
        # Public models work without a key
        self.api_key = api_key or os.getenv('HUGGINGFACE_API_KEY', '')
        self.session = session or requests.Session()
        self.verbose = verbose

    def build_prompt(self, repo_info: RepositoryInfo, files: List[GitHubFile]) -> str:
        file_list = ', '.join(_file_paths(files, 10))
        description = repo_info.description or 'A software project'
        return (
            f"Create a README.md for {repo_info.name} ({repo_info.language}): {description}. "
            f"Files: {file_list}. Include installation, usage, and features."
        )

    def query_model(self, model: str, prompt: str) -> str:
        """
        Run one inference request.

        Raises:
            ProviderFailure: On a non-2xx response or a payload without generated text
            requests.exceptions.RequestException: On transport errors
        """
        headers = {'Content-Type': 'application/json'}
        if self.api_key:
            headers['Authorization'] = f'Bearer {self.api_key}'

        response = self.session.post(
            f"{self.BASE_URL}/{model}",
            headers=headers,
            json={
                'inputs': prompt,
                'parameters': {'max_length': 1000, 'temperature': 0.7, 'do_sample': True},
                'options': {'wait_for_model': True},
            },
        )
        if not response.ok:
            raise ProviderFailure(f"HTTP {response.status_code}: {response.reason}")

        try:
            data = response.json()
        except ValueError as e:
            raise ProviderFailure(f"Invalid JSON from {model}") from e

        if isinstance(data, list) and data and isinstance(data[0], dict) and data[0].get('generated_text'):
            return data[0]['generated_text']
        if isinstance(data, dict) and data.get('generated_text'):
            return data['generated_text']
        raise ProviderFailure("No generated text in response")

    def format_response(self, text: str, repo_info: RepositoryInfo, config: ReadmeConfig) -> str:
        """Drop any preamble before the first heading, add a title if missing, apply alignment."""
        start = text.find('#')
        cleaned = (text[start:] if start != -1 else text).strip()

        if not cleaned.startswith('#'):
            emoji = '🚀 ' if config.add_emojis_to_headings else ''
            cleaned = f"# {emoji}{repo_info.name}\n\n{cleaned}"

        if config.header_alignment != 'left':
            cleaned = f'<div align="{config.header_alignment}">\n\n{cleaned}\n\n</div>'
        return cleaned

    def generate(self, repo_info: RepositoryInfo, files: List[GitHubFile], config: ReadmeConfig) -> ProviderResult:
        prompt = self.build_prompt(repo_info, files)
        if self.verbose:
            console.print(f"[blue]📝 Generated prompt: {len(prompt)} chars[/blue]")

        for model in self.MODELS:
            try:
                text = self.query_model(model, prompt)
            except (ProviderFailure, requests.exceptions.RequestException) as e:
                console.print(f"[yellow]⚠️  Model {model} failed ({e}), trying next...[/yellow]")
                continue

            if len(text) > self.MIN_RESPONSE_LENGTH:
                if self.verbose:
                    console.print(f"[green]✅ {model} responded with {len(text)} chars[/green]")
                return ProviderResult(self.name, self.format_response(text, repo_info, config))

            console.print(f"[yellow]⚠️  Model {model} returned a response that is too short, trying next...[/yellow]")

        console.print("[yellow]⚠️  All Hugging Face models failed, using the fallback template[/yellow]")
        analysis = analyze_repository(repo_info, files)
        return ProviderResult(self.name, render_fallback_readme(repo_info, analysis, config))


class OpenAIProvider:
    """OpenAI chat completions; an API key is required up front."""

    name = 'openai'

    def __init__(self, api_key: Optional[str] = None, client: Optional[openai.OpenAI] = None,
                 verbose: bool = False):
        self.api_key = api_key or os.getenv('OPENAI_API_KEY')
        self._client = client
        self.verbose = verbose

    @property
    def client(self) -> openai.OpenAI:
        if self._client is None:
            self._client = openai.OpenAI(api_key=self.api_key)
        return self._client

    def resolve_model(self, config: ReadmeConfig) -> str:
        if config.ai_model and config.ai_model.startswith(OPENAI_MODEL_PREFIXES):
            return config.ai_model
        return os.getenv('OPENAI_MODEL') or DEFAULT_OPENAI_MODEL

    def build_prompt(self, repo_info: RepositoryInfo, files: List[GitHubFile], config: ReadmeConfig) -> str:
        """
        Create a structured prompt for README generation.

        Args:
            repo_info: Repository information
            files: Fetched repository files
            config: README configuration

        Returns:
            Formatted prompt string
        """
        file_structure = "\n".join(_file_paths(files, 20))
        sections = "\n".join(f"- {section}" for section in config.sections.enabled())

        prompt = f"""Create a comprehensive README.md for the following GitHub repository:

**Repository Information:**
- Name: {repo_info.name}
- Description: {repo_info.description or 'No description provided'}
- Language: {repo_info.language}
- Stars: {repo_info.stars}
- Forks: {repo_info.forks}

**File Structure (first 20 files):**
{file_structure}

**Configuration:**
- Header Alignment: {config.header_alignment}
- Include Emojis: {config.add_emojis_to_headings}
- Badge Style: {config.badge_style}
- License: {config.license_type}

**Sections to Include:**
{sections}
"""
        if config.custom_prompt:
            prompt += f"\n**Additional Instructions:**\n{config.custom_prompt}\n"

        prompt += f"""
**Requirements:**
1. Use professional, clear language
2. Include relevant badges and shields
3. Provide comprehensive installation and usage instructions
4. Add appropriate emojis if enabled
5. Follow the specified alignment for headers
6. Make it engaging and informative
7. Include code examples where appropriate
8. Add a table of contents if the README is long
9. Use the specified badge style: {config.badge_style}

Generate a complete, professional README.md file:"""

        if self.verbose:
            console.print(f"[blue]📝 Generated prompt: {len(prompt.encode('utf-8'))} bytes[/blue]")
        return prompt

    def generate(self, repo_info: RepositoryInfo, files: List[GitHubFile], config: ReadmeConfig) -> ProviderResult:
        """
        Generate a README with a chat completion.

        Raises:
            MissingAPIKeyError: If no OpenAI API key is configured
            ProviderFailure: If the API call fails or returns no content
        """
        if not self.api_key:
            raise MissingAPIKeyError("OpenAI API key is required (set OPENAI_API_KEY)")

        prompt = self.build_prompt(repo_info, files, config)
        model = self.resolve_model(config)

        try:
            with Progress(
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                console=console,
                transient=True,
            ) as progress:
                progress.add_task(f"Generating README with {model}...", total=None)
                completion = self.client.chat.completions.create(
                    model=model,
                    messages=[
                        {'role': 'system', 'content': SYSTEM_PROMPT},
                        {'role': 'user', 'content': prompt},
                    ],
                    max_tokens=4000,
                    temperature=0.7,
                )
        except openai.OpenAIError as e:
            raise ProviderFailure(f"OpenAI request failed: {e}") from e

        content = completion.choices[0].message.content if completion.choices else None
        if not content or not content.strip():
            raise ProviderFailure("OpenAI returned an empty response")

        if self.verbose:
            console.print(f"[green]✅ Received response: {len(content)} chars[/green]")
        return ProviderResult(self.name, content)


ADAPTERS = {
    'local': LocalProvider,
    'huggingface': HuggingFaceProvider,
    'openai': OpenAIProvider,
}


def build_provider_chain(config: ReadmeConfig, verbose: bool = False) -> list:
    """
    Return the providers to try, in order: the configured adapter, then the template.

    Providers without an adapter (anthropic) go straight to the template.
    """
    chain = []
    adapter = ADAPTERS.get(config.ai_provider)
    if adapter is not None:
        chain.append(adapter(verbose=verbose))
    elif verbose:
        console.print(f"[yellow]ℹ️  No adapter for provider '{config.ai_provider}', using templates[/yellow]")
    chain.append(TemplateProvider())
    return chain
