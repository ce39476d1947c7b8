"""
Shared data models for GitSpicefy.
"""

import re
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

from .errors import InvalidInputError


HEADER_ALIGNMENTS = ('left', 'center', 'right')
TOC_STYLES = ('bullet', 'numbered', 'minimal')
AI_PROVIDERS = ('openai', 'anthropic', 'huggingface', 'local')
LICENSE_TYPES = ('MIT', 'Apache-2.0', 'GPL-3.0', 'BSD-3-Clause', 'Custom')
BADGE_STYLES = ('flat', 'flat-square', 'for-the-badge', 'plastic')
COLOR_SCHEMES = ('default', 'blue', 'green', 'purple', 'custom')


@dataclass
class RepositoryInfo:
    """Information about a GitHub repository."""
    name: str
    full_name: str
    description: str = ""
    language: str = "Unknown"
    stars: int = 0
    forks: int = 0
    is_private: bool = False
    default_branch: str = "main"

    @property
    def html_url(self) -> str:
        """Return the full GitHub URL."""
        return f"https://github.com/{self.full_name}"

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> 'RepositoryInfo':
        return cls(
            name=data['name'],
            full_name=data['full_name'],
            description=data.get('description') or "",
            language=data.get('language') or "Unknown",
            stars=data.get('stargazers_count', 0),
            forks=data.get('forks_count', 0),
            is_private=data.get('private', False),
            default_branch=data.get('default_branch') or "main",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'fullName': self.full_name,
            'description': self.description,
            'language': self.language,
            'stars': self.stars,
            'forks': self.forks,
            'isPrivate': self.is_private,
            'defaultBranch': self.default_branch,
        }


@dataclass
class GitHubFile:
    """A file or directory entry from the GitHub contents API."""
    name: str
    path: str
    type: str  # 'file' or 'dir'
    size: Optional[int] = None
    content: Optional[str] = None

    def summary(self) -> Dict[str, str]:
        return {'name': self.name, 'path': self.path, 'type': self.type}


@dataclass
class RepositoryAnalysis:
    """Derived descriptor of a repository's toolchain and structure."""
    project_type: str = "Unknown"
    main_language: str = "Unknown"
    frameworks: List[str] = field(default_factory=list)
    features: List[str] = field(default_factory=list)
    structure: List[str] = field(default_factory=list)
    has_tests: bool = False
    has_documentation: bool = False
    has_ci: bool = False
    has_docker: bool = False
    package_manager: str = "Manual Setup"
    build_tool: str = ""
    dependencies: List[str] = field(default_factory=list)
    scripts: List[str] = field(default_factory=list)


@dataclass
class SectionToggles:
    """Per-section switches for the README template."""
    features: bool = True
    project_structure: bool = True
    project_ideas: bool = False
    roadmap: bool = False
    contributors: bool = True
    license: bool = True
    acknowledgments: bool = True
    installation: bool = True
    usage: bool = True
    tech_stack: bool = True
    badges: bool = True

    @classmethod
    def names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def enabled(self) -> List[str]:
        return [name for name in self.names() if getattr(self, name)]


def _snake_case(key: str) -> str:
    return re.sub(r'(?<!^)(?=[A-Z])', '_', key).lower()


def _check_choice(name: str, value: str, choices) -> None:
    if value not in choices:
        raise InvalidInputError(f"Invalid {name}: {value!r} (expected one of {', '.join(choices)})")


@dataclass
class ReadmeConfig:
    """User-chosen README configuration."""
    header_alignment: str = 'center'
    table_of_contents_style: str = 'bullet'
    generate_logo: bool = False
    add_emojis_to_headings: bool = True
    ai_provider: str = 'local'
    ai_model: str = 'intelligent-template'
    custom_prompt: Optional[str] = None
    sections: SectionToggles = field(default_factory=SectionToggles)
    project_description: Optional[str] = None
    custom_features: List[str] = field(default_factory=list)
    custom_tech_stack: List[str] = field(default_factory=list)
    license_type: str = 'MIT'
    badge_style: str = 'for-the-badge'
    color_scheme: str = 'default'

    def __post_init__(self):
        _check_choice('header alignment', self.header_alignment, HEADER_ALIGNMENTS)
        _check_choice('table of contents style', self.table_of_contents_style, TOC_STYLES)
        _check_choice('AI provider', self.ai_provider, AI_PROVIDERS)
        _check_choice('license type', self.license_type, LICENSE_TYPES)
        _check_choice('badge style', self.badge_style, BADGE_STYLES)
        _check_choice('color scheme', self.color_scheme, COLOR_SCHEMES)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ReadmeConfig':
        """
        Build a config from a JSON-style mapping.

        Accepts snake_case keys as well as the camelCase keys posted by the web client
        (``headerAlignment``, ``sections.techStack`` ...). Unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in (data or {}).items():
            name = _snake_case(key)
            if name not in known:
                continue
            if name == 'sections':
                toggles = {_snake_case(k): bool(v) for k, v in (value or {}).items()}
                value = SectionToggles(**{k: v for k, v in toggles.items() if k in SectionToggles.names()})
            kwargs[name] = value
        return cls(**kwargs)


@dataclass
class GenerationResult:
    """Outcome of one generation request."""
    readme: str
    repository: RepositoryInfo
    files: List[GitHubFile]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'readme': self.readme,
            'repository': self.repository.to_dict(),
            'files': [f.summary() for f in self.files],
        }
