import pytest

from gitspicefy.analyzer import analyze_repository
from gitspicefy.models import ReadmeConfig, RepositoryAnalysis, RepositoryInfo, SectionToggles
from gitspicefy.templates import (
    SECTIONS,
    github_anchor,
    render_basic_readme,
    render_fallback_readme,
    render_features,
    render_installation,
    render_project_ideas,
    render_project_structure,
    render_readme,
    render_roadmap,
    render_table_of_contents,
    render_usage,
)

TECH_STACK = '\U0001F6E0\ufe0f Tech Stack'


@pytest.fixture
def django_analysis(python_repo, django_files):
    return analyze_repository(python_repo, django_files)


def full_config(**overrides):
    return ReadmeConfig(sections=SectionToggles(project_ideas=True, roadmap=True), **overrides)


def test_render_is_deterministic(python_repo, django_analysis):
    config = full_config(generate_logo=True)
    assert render_readme(python_repo, django_analysis, config) == render_readme(python_repo, django_analysis, config)


@pytest.mark.parametrize("toggle, renderer", [
    (toggle, renderer) for toggle, renderer in SECTIONS if toggle is not None
])
def test_disabling_a_section_removes_only_that_section(python_repo, django_analysis, toggle, renderer):
    config = full_config()
    reduced = full_config()
    setattr(reduced.sections, toggle, False)

    full = render_readme(python_repo, django_analysis, config)
    section = renderer(python_repo, django_analysis, config)
    toc = render_table_of_contents(python_repo, django_analysis, config)
    reduced_toc = render_table_of_contents(python_repo, django_analysis, reduced)

    assert section in full
    expected = full.replace(section, '').replace(toc, reduced_toc)
    assert render_readme(python_repo, django_analysis, reduced) == expected


def test_disabling_badges(python_repo, django_analysis):
    config = ReadmeConfig(sections=SectionToggles(badges=False))
    readme = render_readme(python_repo, django_analysis, config)
    assert 'img.shields.io' not in readme
    assert '# 🐍 demo' in readme


def test_optional_sections_are_off_by_default(python_repo, django_analysis):
    readme = render_readme(python_repo, django_analysis, ReadmeConfig())
    assert '## 💡 Project Ideas' not in readme
    assert '## 🗺️ Roadmap' not in readme
    assert '## 📋 About' in readme


def test_django_installation_and_usage(python_repo, django_analysis):
    config = ReadmeConfig()
    installation = render_installation(python_repo, django_analysis, config)
    usage = render_usage(python_repo, django_analysis, config)

    assert 'pip install -r requirements.txt' in installation
    assert 'python -m venv venv' in installation
    assert '- Python (3.8 or higher)' in installation
    assert 'git clone https://github.com/octo/demo.git' in installation
    assert 'python manage.py runserver' in usage


def test_headings_without_emojis(python_repo, django_analysis):
    readme = render_readme(python_repo, django_analysis, ReadmeConfig(add_emojis_to_headings=False))
    assert '## About\n' in readme
    assert '[About](#about)' in readme
    assert '# demo\n' in readme
    assert '📋' not in readme


def test_anchor_matches_github_slug():
    assert github_anchor('📋 About') == '-about'
    assert github_anchor('\U0001F6E0\ufe0f Tech Stack') == '\ufe0f-tech-stack'
    assert github_anchor('Getting Started') == 'getting-started'
    assert github_anchor('CI/CD & Docker') == 'cicd--docker'


def test_toc_links_resolve_to_headings(python_repo, django_analysis):
    config = full_config()
    readme = render_readme(python_repo, django_analysis, config)
    headings = {github_anchor(line[3:]) for line in readme.splitlines() if line.startswith('## ')}
    toc = render_table_of_contents(python_repo, django_analysis, config)
    links = [part.split(')')[0] for part in toc.split('](#')[1:]]

    assert links
    assert set(links) <= headings


def test_toc_styles(python_repo, django_analysis):
    numbered = render_table_of_contents(python_repo, django_analysis, ReadmeConfig(table_of_contents_style='numbered'))
    minimal = render_table_of_contents(python_repo, django_analysis, ReadmeConfig(table_of_contents_style='minimal'))
    bullet = render_table_of_contents(python_repo, django_analysis, ReadmeConfig())

    assert '1. [📋 About](#-about)\n2. [✨ Features]' in numbered
    assert ' · ' in minimal
    assert '\n- ' not in minimal
    assert '- [📋 About](#-about)\n' in bullet


def test_header_alignment(python_repo, django_analysis):
    centered = render_readme(python_repo, django_analysis, ReadmeConfig())
    left = render_readme(python_repo, django_analysis, ReadmeConfig(header_alignment='left'))
    right = render_readme(python_repo, django_analysis, ReadmeConfig(header_alignment='right'))

    assert centered.startswith('<div align="center">')
    assert right.startswith('<div align="right">')
    assert left.startswith('# 🐍 demo')
    assert '<div' not in left


def test_custom_features_replace_detected_ones(python_repo, django_analysis):
    config = ReadmeConfig(custom_features=['Offline mode', 'Plugin system'])
    features = render_features(python_repo, django_analysis, config)
    assert '- 🚀 **Offline mode**\n- 🚀 **Plugin system**\n' in features
    assert '✅' not in features


def test_project_structure_lists_at_most_ten_dirs(python_repo):
    analysis = RepositoryAnalysis(structure=[f"dir{i}" for i in range(12)])
    tree = render_project_structure(python_repo, analysis, ReadmeConfig())

    assert len([line for line in tree.splitlines() if line.startswith('├── ')]) == 10
    assert 'dir10' not in tree
    assert '└── README.md' in tree


def test_project_structure_lists_manifest(python_repo, django_analysis):
    tree = render_project_structure(python_repo, django_analysis, ReadmeConfig())
    assert '├── requirements.txt\n└── README.md' in tree


def test_project_ideas_and_roadmap(python_repo, django_analysis):
    config = ReadmeConfig()
    ideas = render_project_ideas(python_repo, django_analysis, config)
    roadmap = render_roadmap(python_repo, django_analysis, config)

    assert len([line for line in ideas.splitlines() if line.startswith('- ')]) == 5
    assert '- Add machine learning capabilities' in ideas
    assert roadmap.count('- [ ] ') == 8


def test_license_variants(python_repo, django_analysis):
    apache = render_readme(python_repo, django_analysis, ReadmeConfig(license_type='Apache-2.0'))
    custom = render_readme(python_repo, django_analysis, ReadmeConfig(license_type='Custom'))

    assert 'licensed under the Apache-2.0 License' in apache
    assert 'license-Apache--2.0-green' in apache
    assert 'distributed under a custom license' in custom


def test_badge_style(python_repo, django_analysis):
    readme = render_readme(python_repo, django_analysis, ReadmeConfig(badge_style='flat-square'))
    assert 'style=flat-square' in readme
    assert 'style=for-the-badge' not in readme


def test_description_precedence(django_analysis):
    repo = RepositoryInfo(name='demo', full_name='octo/demo', language='Python', description='From GitHub')
    bare = RepositoryInfo(name='demo', full_name='octo/demo', language='Python')

    configured = render_readme(repo, django_analysis, ReadmeConfig(project_description='From config'))
    assert '### From config' in configured
    assert '### From GitHub' in render_readme(repo, django_analysis, ReadmeConfig())
    assert '### A batteries-included web application built with Django' in render_readme(
        bare, django_analysis, ReadmeConfig())


def test_logo_is_embedded(python_repo, django_analysis):
    readme = render_readme(python_repo, django_analysis, ReadmeConfig(generate_logo=True))
    assert readme.index('<svg') < readme.index('# 🐍 demo')


def test_scripts_use_package_manager(python_repo):
    analysis = RepositoryAnalysis(project_type='Node.js Application', package_manager='yarn', scripts=['dev', 'lint'])
    usage = render_usage(python_repo, analysis, ReadmeConfig())
    assert '### Available Scripts' in usage
    assert '- `yarn dev` - Start development server' in usage
    assert '- `yarn lint` - Run linter' in usage


def test_basic_readme(react_files):
    repo = RepositoryInfo(name='web', full_name='octo/web', language='TypeScript', description='')
    analysis = analyze_repository(repo, react_files)

    readme = render_basic_readme(repo, analysis)

    assert readme.startswith('<div align="center">\n\n# web\n')
    assert '## 📚 Table of Contents' in readme
    assert f"- [{TECH_STACK}](#{github_anchor(TECH_STACK)})" in readme
    assert '| ⚛️ **React UI** | Component-based architecture | ✅ |' in readme
    assert '### 🎯 Core Capabilities' in readme
    assert '- **Type Safety**' in readme
    assert '### ⚡ Quick Start' in readme
    assert 'npm install && npm run dev' in readme
    assert '## 📜 Available Scripts' in readme
    assert '- `npm run build` - Build for production' in readme
    assert 'licensed under the MIT License' in readme


def test_basic_readme_without_frameworks():
    repo = RepositoryInfo(name='tool', full_name='octo/tool', language='Haskell')
    readme = render_basic_readme(repo, RepositoryAnalysis(project_type='Haskell Project', main_language='Haskell'))

    assert 'Tech Stack' not in readme
    assert 'Project Structure' not in readme
    assert 'Available Scripts' not in readme
    assert '# Follow the installation and run instructions above' in readme


def test_fallback_readme(python_repo):
    analysis = RepositoryAnalysis(project_type='Python Application', main_language='Python',
                                  package_manager='pip', has_tests=True)
    readme = render_fallback_readme(python_repo, analysis, ReadmeConfig())

    assert '# 🚀 demo' in readme
    assert 'This Python project demonstrates modern development practices and includes:' in readme
    assert '🧪 **Well Tested**' in readme
    assert '🐳' not in readme
    assert 'pip install -r requirements.txt' in readme
