"""
Repository analysis: classify a fetched file set into a RepositoryAnalysis.

Classification uses ordered rule tables of (predicate, classification) pairs.
The first matching rule wins; later rules never overwrite an earlier match.
"""

import json
import re
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .models import GitHubFile, RepositoryAnalysis, RepositoryInfo


class FileIndex:
    """Lower-cased view of a file set, built in a single pass."""

    def __init__(self, files: Iterable[GitHubFile], language: str = "Unknown"):
        self.language = language or "Unknown"
        self.names = set()
        self.paths: List[str] = []
        self.dirs: List[str] = []
        self.contents: Dict[str, str] = {}

        for f in files:
            name = f.name.lower()
            path = f.path.lower()
            if f.type == 'dir':
                self.dirs.append(f.name)
            else:
                self.names.add(name)
            self.paths.append(path)
            if f.content is not None and name not in self.contents:
                self.contents[name] = f.content

    def has(self, *names: str) -> bool:
        return any(name.lower() in self.names for name in names)

    def path_contains(self, *fragments: str) -> bool:
        return any(fragment in path for path in self.paths for fragment in fragments)

    def name_contains(self, *fragments: str) -> bool:
        return any(fragment in name for name in self.names for fragment in fragments)

    def content(self, name: str) -> str:
        return self.contents.get(name.lower(), "")


Rule = Tuple[Callable[[FileIndex], bool], str]

NODE_MANIFESTS = ('package.json',)
PYTHON_MANIFESTS = ('requirements.txt', 'pyproject.toml', 'setup.py', 'Pipfile')


def _node(idx: FileIndex) -> bool:
    return idx.has(*NODE_MANIFESTS)


def _python(idx: FileIndex) -> bool:
    return idx.has(*PYTHON_MANIFESTS)


def _language(*languages: str) -> Callable[[FileIndex], bool]:
    return lambda idx: idx.language in languages


PROJECT_TYPE_RULES: Sequence[Rule] = (
    (lambda idx: _node(idx) and idx.has('next.config.js', 'next.config.mjs', 'next.config.ts'), 'Next.js Application'),
    (lambda idx: _node(idx) and idx.path_contains('src/app.js', 'src/app.jsx', 'src/app.tsx'), 'React Application'),
    (lambda idx: _node(idx) and (idx.has('vue.config.js') or idx.path_contains('src/app.vue')), 'Vue.js Application'),
    (lambda idx: _node(idx) and idx.has('angular.json'), 'Angular Application'),
    (_node, 'Node.js Application'),
    (lambda idx: _python(idx) and idx.has('manage.py'), 'Django Application'),
    (lambda idx: _python(idx) and idx.has('app.py', 'main.py'), 'Flask/FastAPI Application'),
    (_python, 'Python Application'),
    (lambda idx: idx.has('Cargo.toml'), 'Rust Application'),
    (lambda idx: idx.has('go.mod'), 'Go Application'),
    (lambda idx: idx.has('pom.xml', 'build.gradle', 'build.gradle.kts'), 'Java Application'),
    (lambda idx: idx.has('composer.json'), 'PHP Application'),
    (lambda idx: idx.has('Gemfile'), 'Ruby Application'),
    # No manifest fetched: fall back on the repository language
    (lambda idx: idx.language == 'Python' and idx.has('manage.py'), 'Django Application'),
    (lambda idx: idx.language == 'Python' and idx.has('app.py', 'main.py'), 'Python Application'),
    (_language('Python'), 'Python Project'),
    (_language('JavaScript', 'TypeScript'), 'Node.js Application'),
)

PACKAGE_MANAGER_RULES: Sequence[Rule] = (
    (_python, 'pip'),
    (lambda idx: idx.has('Cargo.toml'), 'Cargo'),
    (lambda idx: idx.has('go.mod'), 'Go Modules'),
    (lambda idx: idx.has('yarn.lock'), 'yarn'),
    (lambda idx: idx.has('pnpm-lock.yaml'), 'pnpm'),
    (lambda idx: idx.has('package-lock.json', 'package.json'), 'npm'),
    (_language('Python'), 'pip'),
    (_language('Rust'), 'Cargo'),
    (_language('Go'), 'Go Modules'),
    (_language('JavaScript', 'TypeScript'), 'npm'),
    (_language('Java'), 'Maven/Gradle'),
    (_language('C#'), 'NuGet'),
    (_language('Ruby'), 'Bundler'),
    (_language('PHP'), 'Composer'),
)

BUILD_TOOL_RULES: Sequence[Rule] = (
    (lambda idx: idx.has('webpack.config.js', 'webpack.config.ts'), 'Webpack'),
    (lambda idx: idx.has('vite.config.js', 'vite.config.ts', 'vite.config.mjs'), 'Vite'),
    (lambda idx: idx.has('rollup.config.js', 'rollup.config.mjs'), 'Rollup'),
    (lambda idx: idx.has('gulpfile.js'), 'Gulp'),
)

FEATURE_RULES: Sequence[Rule] = (
    (lambda idx: idx.path_contains('api', 'routes'), 'RESTful API'),
    (lambda idx: idx.path_contains('auth', 'login'), 'Authentication'),
    (lambda idx: idx.path_contains('database', 'db') or idx.name_contains('schema'), 'Database Integration'),
    (lambda idx: idx.path_contains('component', 'ui'), 'Component-based Architecture'),
    (lambda idx: idx.path_contains('test', 'spec'), 'Comprehensive Testing'),
    (lambda idx: idx.name_contains('docker'), 'Docker Support'),
    (lambda idx: idx.path_contains('.github/workflows'), 'CI/CD Pipeline'),
)

# package.json dependency name -> framework
NODE_FRAMEWORKS: Sequence[Tuple[Tuple[str, ...], str]] = (
    (('react',), 'React'),
    (('next',), 'Next.js'),
    (('vue',), 'Vue.js'),
    (('angular', '@angular/core'), 'Angular'),
    (('express',), 'Express.js'),
    (('typescript',), 'TypeScript'),
    (('tailwindcss',), 'Tailwind CSS'),
    (('sass', 'scss'), 'Sass/SCSS'),
    (('webpack',), 'Webpack'),
    (('vite',), 'Vite'),
)

PYTHON_FRAMEWORKS: Sequence[Tuple[str, str]] = (
    ('django', 'Django'),
    ('flask', 'Flask'),
    ('fastapi', 'FastAPI'),
)

CI_FILE_NAMES = ('.travis.yml', '.gitlab-ci.yml', 'jenkinsfile', 'azure-pipelines.yml', 'bitbucket-pipelines.yml')


def classify(rules: Sequence[Rule], idx: FileIndex, default: str) -> str:
    """Return the classification of the first rule whose predicate matches."""
    for predicate, classification in rules:
        if predicate(idx):
            return classification
    return default


def classify_all(rules: Sequence[Rule], idx: FileIndex) -> List[str]:
    """Return the classification of every matching rule, in rule order."""
    return [classification for predicate, classification in rules if predicate(idx)]


def parse_package_json(content: str) -> Dict[str, List[str]]:
    """Extract dependencies, scripts and frameworks from package.json content."""
    try:
        pkg = json.loads(content)
    except (TypeError, ValueError):
        return {'dependencies': [], 'scripts': [], 'frameworks': []}
    if not isinstance(pkg, dict):
        return {'dependencies': [], 'scripts': [], 'frameworks': []}

    deps = {}
    deps.update(pkg.get('dependencies') or {})
    deps.update(pkg.get('devDependencies') or {})
    dependencies = list(deps)
    scripts = list(pkg.get('scripts') or {})

    frameworks = [
        framework for names, framework in NODE_FRAMEWORKS
        if any(name in deps for name in names)
    ]
    return {'dependencies': dependencies, 'scripts': scripts, 'frameworks': frameworks}


REQUIREMENT_NAME = re.compile(r'^\s*([A-Za-z0-9][A-Za-z0-9._-]*)')


def parse_requirements(content: str) -> List[str]:
    """Extract distribution names from requirements.txt content."""
    names = []
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith(('#', '-')):
            continue
        match = REQUIREMENT_NAME.match(line)
        if match:
            names.append(match.group(1))
    return names


def _dedupe(items: Iterable[str]) -> List[str]:
    seen = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return seen


def detect_frameworks(idx: FileIndex) -> List[str]:
    frameworks = []
    if idx.has('package.json'):
        frameworks.extend(parse_package_json(idx.content('package.json'))['frameworks'])

    python_manifests = " ".join(idx.content(name) for name in PYTHON_MANIFESTS).lower()
    for needle, framework in PYTHON_FRAMEWORKS:
        if needle in python_manifests:
            frameworks.append(framework)

    return _dedupe(frameworks)


def analyze_repository(repo_info: RepositoryInfo, files: List[GitHubFile],
                       index: Optional[FileIndex] = None) -> RepositoryAnalysis:
    """
    Classify a repository from its fetched files.

    Args:
        repo_info: Repository metadata
        files: Files and directories returned by the GitHub walk

    Returns:
        RepositoryAnalysis descriptor
    """
    language = repo_info.language or "Unknown"
    idx = index or FileIndex(files, language)

    dependencies: List[str] = []
    scripts: List[str] = []
    if idx.has('package.json'):
        package = parse_package_json(idx.content('package.json'))
        dependencies.extend(package['dependencies'])
        scripts.extend(package['scripts'])
    if idx.has('requirements.txt'):
        dependencies.extend(parse_requirements(idx.content('requirements.txt')))

    return RepositoryAnalysis(
        project_type=classify(PROJECT_TYPE_RULES, idx, f"{language} Project"),
        main_language=language,
        frameworks=detect_frameworks(idx),
        features=classify_all(FEATURE_RULES, idx),
        structure=_dedupe(idx.dirs),
        has_tests=idx.path_contains('test', 'spec'),
        has_documentation=idx.name_contains('readme') or idx.path_contains('docs'),
        has_ci=idx.path_contains('.github/workflows') or idx.has(*CI_FILE_NAMES),
        has_docker=idx.name_contains('docker'),
        package_manager=classify(PACKAGE_MANAGER_RULES, idx, 'Manual Setup'),
        build_tool=classify(BUILD_TOOL_RULES, idx, ''),
        dependencies=_dedupe(dependencies),
        scripts=scripts,
    )
