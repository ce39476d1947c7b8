"""
Markdown README templates.

Every section is a pure function of (RepositoryInfo, RepositoryAnalysis, ReadmeConfig)
that returns a Markdown string. render_readme concatenates the enabled sections in a
fixed order, so the same inputs always produce the same bytes.
"""

import unicodedata
from typing import Callable, List, Optional, Sequence, Tuple
from urllib.parse import quote

from .logo import generate_logo
from .models import ReadmeConfig, RepositoryAnalysis, RepositoryInfo

SectionRenderer = Callable[[RepositoryInfo, RepositoryAnalysis, ReadmeConfig], str]

GITSPICEFY_URL = "https://gitspicefy.com"
MAX_STRUCTURE_DIRS = 10
MAX_PROJECT_IDEAS = 5

# section key -> (heading emoji, heading title)
HEADINGS = {
    'toc': ('📚', 'Table of Contents'),
    'about': ('📋', 'About'),
    'features': ('✨', 'Features'),
    'tech_stack': ('🛠️', 'Tech Stack'),
    'installation': ('🚀', 'Getting Started'),
    'usage': ('💻', 'Usage'),
    'project_structure': ('📁', 'Project Structure'),
    'project_ideas': ('💡', 'Project Ideas'),
    'roadmap': ('🗺️', 'Roadmap'),
    'contributors': ('🤝', 'Contributing'),
    'license': ('📄', 'License'),
    'acknowledgments': ('🙏', 'Acknowledgments'),
}

PROJECT_EMOJIS = {
    'Next.js Application': '⚡',
    'React Application': '⚛️',
    'Vue.js Application': '💚',
    'Angular Application': '🅰️',
    'Node.js Application': '🟢',
    'Django Application': '🐍',
    'Flask/FastAPI Application': '🐍',
    'Python Application': '🐍',
    'Python Project': '🐍',
    'Rust Application': '🦀',
    'Go Application': '🐹',
    'Java Application': '☕',
}

PROJECT_BLURBS = {
    'Next.js Application': 'A modern, full-stack web application built with Next.js, featuring server-side rendering and optimal performance',
    'React Application': 'A dynamic, interactive web application built with React, showcasing modern component-based architecture',
    'Vue.js Application': 'A progressive web application built with Vue.js, combining simplicity with powerful features',
    'Angular Application': 'A structured, enterprise-ready web application built with Angular',
    'Node.js Application': 'A scalable server-side application built with Node.js, designed for high performance and reliability',
    'Django Application': 'A batteries-included web application built with Django, designed for rapid and secure development',
    'Flask/FastAPI Application': 'A lightweight Python web service with clean routing and fast request handling',
    'Python Application': 'A robust Python application demonstrating clean code practices and efficient problem-solving',
    'Rust Application': 'A high-performance, memory-safe application built with Rust, emphasizing speed and reliability',
    'Go Application': 'A concurrent, efficient application built with Go, designed for scalability and simplicity',
}

TECH_DESCRIPTIONS = {
    'React': 'A JavaScript library for building user interfaces',
    'Next.js': 'The React framework for production',
    'Vue.js': 'The progressive JavaScript framework',
    'Angular': 'Platform for building mobile and desktop web applications',
    'Express.js': 'Fast, unopinionated, minimalist web framework for Node.js',
    'Django': 'High-level Python web framework',
    'Flask': 'Lightweight WSGI web application framework',
    'FastAPI': 'Modern, fast web framework for building APIs with Python',
    'TypeScript': 'JavaScript with syntax for types',
    'JavaScript': 'Programming language of the web',
    'Python': 'Programming language that lets you work quickly',
    'Node.js': "JavaScript runtime built on Chrome's V8 JavaScript engine",
    'Tailwind CSS': 'Utility-first CSS framework',
    'Sass/SCSS': 'CSS extension language',
    'Webpack': 'Module bundler',
    'Vite': 'Next generation frontend tooling',
}

# technology -> (shields.io logo, colour)
TECH_ICONS = {
    'React': ('react', '61DAFB'),
    'Next.js': ('next.js', '000000'),
    'Vue.js': ('vue.js', '4FC08D'),
    'Angular': ('angular', 'DD0031'),
    'Express.js': ('express', '000000'),
    'Django': ('django', '092E20'),
    'Flask': ('flask', '000000'),
    'FastAPI': ('fastapi', '009688'),
    'TypeScript': ('typescript', '3178C6'),
    'JavaScript': ('javascript', 'F7DF1E'),
    'Python': ('python', '3776AB'),
    'Node.js': ('node.js', '339933'),
    'Tailwind CSS': ('tailwindcss', '06B6D4'),
}

SCRIPT_DESCRIPTIONS = {
    'dev': 'Start development server',
    'build': 'Build for production',
    'start': 'Start production server',
    'test': 'Run tests',
    'lint': 'Run linter',
    'format': 'Format code',
    'deploy': 'Deploy application',
}

NODE_MANAGERS = ('npm', 'yarn', 'pnpm')

PREREQUISITES = {
    'pip': ['Python (3.8 or higher)', 'pip'],
    'Cargo': ['Rust (1.60 or higher)', 'Cargo'],
    'Go Modules': ['Go (1.19 or higher)'],
    'npm': ['Node.js (v16 or higher)', 'npm'],
    'yarn': ['Node.js (v16 or higher)', 'yarn'],
    'pnpm': ['Node.js (v16 or higher)', 'pnpm'],
    'Maven/Gradle': ['Java (JDK 17 or higher)', 'Maven or Gradle'],
    'NuGet': ['.NET SDK (6.0 or higher)'],
    'Bundler': ['Ruby (3.0 or higher)', 'Bundler'],
    'Composer': ['PHP (8.1 or higher)', 'Composer'],
}

INSTALL_COMMANDS = {
    'pip': (
        "python -m venv venv\n"
        "source venv/bin/activate  # On Windows: venv\\Scripts\\activate\n"
        "pip install -r requirements.txt"
    ),
    'Cargo': 'cargo build',
    'Go Modules': 'go mod download',
    'npm': 'npm install',
    'yarn': 'yarn install',
    'pnpm': 'pnpm install',
    'Maven/Gradle': 'mvn install\n# or\n./gradlew build',
    'NuGet': 'dotnet restore',
    'Bundler': 'bundle install',
    'Composer': 'composer install',
}

MANIFESTS = {
    'pip': 'requirements.txt',
    'Cargo': 'Cargo.toml',
    'Go Modules': 'go.mod',
    'npm': 'package.json',
    'yarn': 'package.json',
    'pnpm': 'package.json',
    'Bundler': 'Gemfile',
    'Composer': 'composer.json',
}

SCRIPT_RUNNERS = {'npm': 'npm run', 'yarn': 'yarn', 'pnpm': 'pnpm'}

ROADMAP = (
    'Improve documentation and code comments',
    'Add comprehensive unit and integration tests',
    'Performance optimization and code refactoring',
    'Implement user feedback and feature requests',
    'Add internationalization (i18n) support',
    'Create mobile-responsive design improvements',
    'Set up automated deployment pipeline',
    'Add monitoring and logging capabilities',
)

CONTRIBUTING_STEPS = (
    "Contributions are welcome! Please feel free to submit a Pull Request.\n\n"
    "1. Fork the project\n"
    "2. Create your feature branch (`git checkout -b feature/AmazingFeature`)\n"
    "3. Commit your changes (`git commit -m 'Add some AmazingFeature'`)\n"
    "4. Push to the branch (`git push origin feature/AmazingFeature`)\n"
    "5. Open a Pull Request\n\n"
)


def github_anchor(text: str) -> str:
    """
    Return the anchor GitHub generates for a heading.

    Lower-cases the text, drops everything except letters, marks, numbers,
    connector punctuation, spaces and hyphens, then turns spaces into hyphens
    ("📋 About" -> "-about").
    """
    kept = []
    for ch in text.lower():
        category = unicodedata.category(ch)
        if ch in ' -' or category[0] in 'LMN' or category == 'Pc':
            kept.append(ch)
    return ''.join(kept).replace(' ', '-')


def heading_text(key: str, config: ReadmeConfig) -> str:
    emoji, title = HEADINGS[key]
    return f"{emoji} {title}" if config.add_emojis_to_headings else title


def heading(key: str, config: ReadmeConfig, level: int = 2) -> str:
    return f"{'#' * level} {heading_text(key, config)}\n\n"


def _subheading(title: str, emoji: str, config: ReadmeConfig) -> str:
    prefix = f"{emoji} " if config.add_emojis_to_headings else ""
    return f"### {prefix}{title}\n\n"


def _shield_text(text: str) -> str:
    # shields.io static badges use '-' and '_' as separators
    return quote(text.replace('-', '--').replace('_', '__'), safe='')


def _known_language(repo_info: RepositoryInfo) -> bool:
    return bool(repo_info.language) and repo_info.language != 'Unknown'


def project_emoji(project_type: str) -> str:
    return PROJECT_EMOJIS.get(project_type, '🚀')


def describe(repo_info: RepositoryInfo, analysis: RepositoryAnalysis, config: ReadmeConfig) -> str:
    """Pick the project description: configured, repository, then project-type blurb."""
    if config.project_description:
        return config.project_description
    if repo_info.description:
        return repo_info.description
    return PROJECT_BLURBS.get(
        analysis.project_type,
        f"A well-crafted {repo_info.language} project showcasing modern development practices",
    )


def tech_description(tech: str) -> str:
    return TECH_DESCRIPTIONS.get(tech, f"{tech} framework/library")


def script_description(script: str) -> str:
    return SCRIPT_DESCRIPTIONS.get(script, f"Run {script} command")


def prerequisites(analysis: RepositoryAnalysis) -> List[str]:
    return PREREQUISITES.get(analysis.package_manager, []) + ['Git']


def install_command(analysis: RepositoryAnalysis) -> str:
    return INSTALL_COMMANDS.get(analysis.package_manager, '# Follow project-specific installation instructions')


def usage_command(analysis: RepositoryAnalysis) -> str:
    manager = analysis.package_manager
    if analysis.project_type == 'Django Application':
        return 'python manage.py migrate\npython manage.py runserver'
    if manager == 'pip':
        return 'python main.py\n# or\npython app.py\n# or if using a specific script\npython src/main.py'
    if manager == 'Cargo':
        return 'cargo run\n# or for release build\ncargo run --release'
    if manager == 'Go Modules':
        return 'go run main.go\n# or build and run\ngo build\n./main'
    if 'Next.js' in analysis.project_type:
        return 'npm run dev\n# or\nyarn dev\n# or\npnpm dev\n\n# Open http://localhost:3000 in your browser'
    if manager in NODE_MANAGERS:
        runner = SCRIPT_RUNNERS[manager]
        return f"{manager} start\n# or for development\n{runner} dev"
    return '# Run the application\n# Check project documentation for specific commands'


def project_ideas(repo_info: RepositoryInfo, analysis: RepositoryAnalysis) -> List[str]:
    """Five deterministic follow-up ideas, project-type specific ones first."""
    project_type = analysis.project_type
    ideas = []
    if 'React' in project_type or 'Next.js' in project_type:
        ideas.append('Add Progressive Web App (PWA) capabilities')
        ideas.append('Implement server-side rendering optimizations')
    if any(name in project_type for name in ('Python', 'Django', 'Flask')):
        ideas.append('Add machine learning capabilities')
        ideas.append('Create a REST API with FastAPI')
    if 'Node.js' in project_type:
        ideas.append('Add a GraphQL API layer')
    if 'Rust' in project_type or 'Go ' in f"{project_type} ":
        ideas.append('Build a command-line companion tool')

    ideas.extend([
        f"Extend {repo_info.name} with additional {project_type} features",
        'Create a mobile version using React Native or Flutter',
        'Build a comprehensive admin dashboard',
        'Add real-time features with WebSockets',
        'Implement advanced analytics and reporting',
    ])
    return ideas[:MAX_PROJECT_IDEAS]


def roadmap() -> List[str]:
    return list(ROADMAP)


def render_badges(repo_info: RepositoryInfo, analysis: RepositoryAnalysis, config: ReadmeConfig) -> str:
    style = config.badge_style
    repo = repo_info.full_name
    badges = [
        f"[![GitHub stars](https://img.shields.io/github/stars/{repo}?style={style}&logo=github)]"
        f"(https://github.com/{repo}/stargazers)",
        f"[![GitHub forks](https://img.shields.io/github/forks/{repo}?style={style}&logo=github)]"
        f"(https://github.com/{repo}/network)",
        f"[![GitHub issues](https://img.shields.io/github/issues/{repo}?style={style}&logo=github)]"
        f"(https://github.com/{repo}/issues)",
        f"[![License](https://img.shields.io/badge/license-{_shield_text(config.license_type)}-green?style={style})]"
        f"(LICENSE)",
    ]
    if _known_language(repo_info):
        badges.append(
            f"[![Language](https://img.shields.io/badge/language-{_shield_text(repo_info.language)}-blue?style={style})]"
            f"(https://github.com/{repo})"
        )
    if analysis.has_tests:
        badges.append(f"![Tests](https://img.shields.io/badge/tests-included-brightgreen?style={style})")
    if analysis.has_ci:
        badges.append(f"![CI/CD](https://img.shields.io/badge/CI%2FCD-enabled-blue?style={style})")
    return " ".join(badges) + "\n\n"


def render_header(repo_info: RepositoryInfo, analysis: RepositoryAnalysis, config: ReadmeConfig) -> str:
    aligned = config.header_alignment != 'left'
    header = f'<div align="{config.header_alignment}">\n\n' if aligned else ""

    if config.generate_logo:
        header += generate_logo(repo_info.name, repo_info.description, analysis.project_type) + "\n\n"

    title_emoji = f"{project_emoji(analysis.project_type)} " if config.add_emojis_to_headings else ""
    header += f"# {title_emoji}{repo_info.name}\n\n"
    header += f"### {describe(repo_info, analysis, config)}\n\n"

    if config.sections.badges:
        header += render_badges(repo_info, analysis, config)
    if aligned:
        header += "</div>\n\n"
    return header + "---\n\n"


TOC_SECTIONS = (
    'about', 'features', 'tech_stack', 'installation', 'usage', 'project_structure',
    'project_ideas', 'roadmap', 'contributors', 'license', 'acknowledgments',
)


def render_table_of_contents(repo_info: RepositoryInfo, analysis: RepositoryAnalysis,
                             config: ReadmeConfig) -> str:
    entries = []
    for key in TOC_SECTIONS:
        if key != 'about' and not getattr(config.sections, key):
            continue
        text = heading_text(key, config)
        entries.append(f"[{text}](#{github_anchor(text)})")

    style = config.table_of_contents_style
    if style == 'minimal':
        body = " · ".join(entries) + "\n"
    elif style == 'numbered':
        body = "".join(f"{number}. {entry}\n" for number, entry in enumerate(entries, 1))
    else:
        body = "".join(f"- {entry}\n" for entry in entries)
    return heading('toc', config) + body + "\n"


def render_about(repo_info: RepositoryInfo, analysis: RepositoryAnalysis, config: ReadmeConfig) -> str:
    section = heading('about', config)
    section += f"{describe(repo_info, analysis, config)}\n\n"
    section += _subheading('Key Highlights', '🎯', config)
    section += f"- **Project Type**: {analysis.project_type}\n"
    section += f"- **Language**: {repo_info.language}\n"
    section += f"- **Package Manager**: {analysis.package_manager}\n"
    if analysis.build_tool:
        section += f"- **Build Tool**: {analysis.build_tool}\n"
    section += f"- **Stars**: {repo_info.stars} ⭐\n"
    section += f"- **Forks**: {repo_info.forks} 🍴\n"
    if analysis.has_tests:
        section += "- **Testing**: ✅ Comprehensive test suite\n"
    if analysis.has_ci:
        section += "- **CI/CD**: ✅ Automated workflows\n"
    if analysis.has_docker:
        section += "- **Docker**: ✅ Containerized deployment\n"
    return section + "\n"


def render_features(repo_info: RepositoryInfo, analysis: RepositoryAnalysis, config: ReadmeConfig) -> str:
    section = heading('features', config)

    if config.custom_features:
        for feature in config.custom_features:
            section += f"- 🚀 **{feature}**\n"
        return section + "\n"

    for feature in analysis.features:
        section += f"- ✅ **{feature}**\n"
    for framework in analysis.frameworks:
        section += f"- 🛠️ **{framework}** - Modern {framework} implementation\n"
    section += "- 📱 **Responsive Design** - Works on all devices\n"
    section += "- ⚡ **High Performance** - Optimized for speed\n"
    section += "- 🔧 **Easy Setup** - Quick installation and configuration\n"
    return section + "\n"


def render_tech_stack(repo_info: RepositoryInfo, analysis: RepositoryAnalysis, config: ReadmeConfig) -> str:
    section = heading('tech_stack', config)

    if config.custom_tech_stack:
        for tech in config.custom_tech_stack:
            section += f"- **{tech}**\n"
        return section + "\n"

    if _known_language(repo_info):
        section += f"- **{repo_info.language}** - Primary programming language\n"
    for framework in analysis.frameworks:
        section += f"- **{framework}** - {tech_description(framework)}\n"
    section += f"- **{analysis.package_manager}** - Package management\n"
    if analysis.build_tool:
        section += f"- **{analysis.build_tool}** - Build tool\n"
    section += "- **Git** - Version control\n"
    section += "- **GitHub** - Code hosting and collaboration\n"
    return section + "\n"


def render_installation(repo_info: RepositoryInfo, analysis: RepositoryAnalysis, config: ReadmeConfig) -> str:
    section = heading('installation', config)
    section += "### Prerequisites\n\n"
    section += "".join(f"- {item}\n" for item in prerequisites(analysis))
    section += "\n### Installation\n\n"
    section += "1. Clone the repository:\n"
    section += "```bash\n"
    section += f"git clone https://github.com/{repo_info.full_name}.git\n"
    section += f"cd {repo_info.name}\n"
    section += "```\n\n"
    section += "2. Install dependencies:\n"
    section += "```bash\n"
    section += f"{install_command(analysis)}\n"
    section += "```\n\n"
    return section


def render_usage(repo_info: RepositoryInfo, analysis: RepositoryAnalysis, config: ReadmeConfig) -> str:
    section = heading('usage', config)
    section += f"```bash\n{usage_command(analysis)}\n```\n\n"

    if analysis.scripts:
        runner = SCRIPT_RUNNERS.get(analysis.package_manager, 'npm run')
        section += "### Available Scripts\n\n"
        for script in analysis.scripts:
            section += f"- `{runner} {script}` - {script_description(script)}\n"
        section += "\n"
    return section


def render_project_structure(repo_info: RepositoryInfo, analysis: RepositoryAnalysis,
                             config: ReadmeConfig) -> str:
    tree = [f"{repo_info.name}/"]
    tree.extend(f"├── {directory}/" for directory in analysis.structure[:MAX_STRUCTURE_DIRS])
    manifest = MANIFESTS.get(analysis.package_manager)
    if manifest:
        tree.append(f"├── {manifest}")
    tree.append("└── README.md")
    return heading('project_structure', config) + "```\n" + "\n".join(tree) + "\n```\n\n"


def render_project_ideas(repo_info: RepositoryInfo, analysis: RepositoryAnalysis, config: ReadmeConfig) -> str:
    ideas = "".join(f"- {idea}\n" for idea in project_ideas(repo_info, analysis))
    return heading('project_ideas', config) + ideas + "\n"


def render_roadmap(repo_info: RepositoryInfo, analysis: RepositoryAnalysis, config: ReadmeConfig) -> str:
    items = "".join(f"- [ ] {item}\n" for item in roadmap())
    return heading('roadmap', config) + items + "\n"


def render_contributing(repo_info: RepositoryInfo, analysis: RepositoryAnalysis, config: ReadmeConfig) -> str:
    return heading('contributors', config) + CONTRIBUTING_STEPS


def _license_sentence(license_type: str) -> str:
    if license_type == 'Custom':
        return "This project is distributed under a custom license - see the [LICENSE](LICENSE) file for details.\n\n"
    return f"This project is licensed under the {license_type} License - see the [LICENSE](LICENSE) file for details.\n\n"


def render_license(repo_info: RepositoryInfo, analysis: RepositoryAnalysis, config: ReadmeConfig) -> str:
    return heading('license', config) + _license_sentence(config.license_type)


def render_acknowledgments(repo_info: RepositoryInfo, analysis: RepositoryAnalysis,
                           config: ReadmeConfig) -> str:
    return heading('acknowledgments', config) + (
        "- Thanks to all contributors who have helped shape this project\n"
        "- Built with ❤️ using modern development practices\n"
        f"- Generated with [GitSpicefy]({GITSPICEFY_URL}) 🚀\n\n"
    )


# (toggle, renderer) in output order; None means always rendered
SECTIONS: Sequence[Tuple[Optional[str], SectionRenderer]] = (
    (None, render_header),
    (None, render_table_of_contents),
    (None, render_about),
    ('features', render_features),
    ('tech_stack', render_tech_stack),
    ('installation', render_installation),
    ('usage', render_usage),
    ('project_structure', render_project_structure),
    ('project_ideas', render_project_ideas),
    ('roadmap', render_roadmap),
    ('contributors', render_contributing),
    ('license', render_license),
    ('acknowledgments', render_acknowledgments),
)


def render_readme(repo_info: RepositoryInfo, analysis: RepositoryAnalysis, config: ReadmeConfig) -> str:
    """
    Render the full README for an analyzed repository.

    Args:
        repo_info: Repository metadata
        analysis: Analyzer output
        config: README configuration; section toggles gate individual sections

    Returns:
        Markdown document
    """
    return "".join(
        render(repo_info, analysis, config)
        for toggle, render in SECTIONS
        if toggle is None or getattr(config.sections, toggle)
    )


def _fallback_highlights(repo_info: RepositoryInfo, analysis: RepositoryAnalysis) -> List[str]:
    language = repo_info.language
    highlights = [f"🚀 **Modern {language}** - Built with latest {language} features"]
    if analysis.has_tests:
        highlights.append('🧪 **Well Tested** - Comprehensive test coverage')
    if analysis.has_ci:
        highlights.append('🔄 **CI/CD Ready** - Automated deployment pipeline')
    if analysis.has_docker:
        highlights.append('🐳 **Dockerized** - Easy deployment with Docker')
    if analysis.has_documentation:
        highlights.append('📚 **Well Documented** - Comprehensive documentation')
    highlights.append('⚡ **High Performance** - Optimized for speed and efficiency')
    highlights.append('🔧 **Easy Setup** - Quick installation and configuration')
    highlights.append('📱 **Cross Platform** - Works on multiple platforms')
    return highlights


def render_fallback_readme(repo_info: RepositoryInfo, analysis: RepositoryAnalysis,
                           config: ReadmeConfig) -> str:
    """Compact README used when a remote model returns nothing usable."""
    description = (config.project_description or repo_info.description
                   or f"A modern {repo_info.language} project with advanced features")
    aligned = config.header_alignment != 'left'

    readme = f'<div align="{config.header_alignment}">\n\n' if aligned else ""
    if config.generate_logo:
        readme += generate_logo(repo_info.name, repo_info.description, analysis.project_type) + "\n\n"
    title_emoji = "🚀 " if config.add_emojis_to_headings else ""
    readme += f"# {title_emoji}{repo_info.name}\n\n"
    readme += f"### {description}\n\n"
    if config.sections.badges:
        readme += render_badges(repo_info, analysis, config)
    if aligned:
        readme += "</div>\n\n"
    readme += "---\n\n"

    readme += heading('about', config)
    readme += f"{description}\n\n"
    readme += f"This {repo_info.language} project demonstrates modern development practices and includes:\n\n"
    readme += "".join(f"- {highlight}\n" for highlight in _fallback_highlights(repo_info, analysis))
    readme += "\n"

    if config.sections.tech_stack:
        readme += render_tech_stack(repo_info, analysis, config)
    if config.sections.installation:
        readme += heading('installation', config)
        readme += "### Prerequisites\n\n"
        readme += "".join(f"- {item}\n" for item in prerequisites(analysis))
        readme += "\n### Installation\n\n```bash\n"
        readme += f"git clone https://github.com/{repo_info.full_name}.git\n"
        readme += f"cd {repo_info.name}\n"
        readme += f"{install_command(analysis)}\n```\n\n"
    if config.sections.usage:
        readme += heading('usage', config) + f"```bash\n{usage_command(analysis)}\n```\n\n"
    if config.sections.contributors:
        readme += render_contributing(repo_info, analysis, config)
    if config.sections.license:
        readme += render_license(repo_info, analysis, config)
    if config.sections.acknowledgments:
        readme += render_acknowledgments(repo_info, analysis, config)
    return readme


# package manager -> prerequisite badges for the basic layout
PREREQUISITE_BADGES = {
    'pip': [
        "![Python](https://img.shields.io/badge/Python-3.8+-3776AB?style=flat&logo=python&logoColor=white) **Python** (3.8 or higher)",
        "![pip](https://img.shields.io/badge/pip-latest-3776AB?style=flat&logo=python&logoColor=white) **pip**",
    ],
    'Go Modules': [
        "![Go](https://img.shields.io/badge/Go-1.19+-00ADD8?style=flat&logo=go&logoColor=white) **Go** (1.19 or higher)",
    ],
    'Cargo': [
        "![Rust](https://img.shields.io/badge/Rust-1.60+-000000?style=flat&logo=rust&logoColor=white) **Rust** (1.60 or higher)",
        "![Cargo](https://img.shields.io/badge/Cargo-latest-000000?style=flat&logo=rust&logoColor=white) **Cargo**",
    ],
    'npm': [
        "![Node.js](https://img.shields.io/badge/Node.js-v16+-339933?style=flat&logo=node.js&logoColor=white) **Node.js** (v16 or higher)",
        "![npm](https://img.shields.io/badge/npm-latest-CB3837?style=flat&logo=npm&logoColor=white) **npm** or **yarn**",
    ],
}
PREREQUISITE_BADGES['yarn'] = PREREQUISITE_BADGES['pnpm'] = PREREQUISITE_BADGES['npm']
GIT_BADGE = "![Git](https://img.shields.io/badge/Git-latest-F05032?style=flat&logo=git&logoColor=white) **Git**"

# package manager -> (start command, one-line quick start)
QUICK_START = {
    'pip': ('python main.py', 'pip install -r requirements.txt && python main.py'),
    'Go Modules': ('go run main.go', 'go mod download && go run main.go'),
    'Cargo': ('cargo run', 'cargo run'),
    'npm': ('npm start', 'npm install && npm run dev'),
    'yarn': ('yarn start', 'yarn install && yarn dev'),
    'pnpm': ('pnpm start', 'pnpm install && pnpm dev'),
}


def _core_capabilities(analysis: RepositoryAnalysis) -> List[Tuple[str, str]]:
    frameworks = analysis.frameworks
    capabilities = []
    if any(name in frameworks for name in ('React', 'Vue.js', 'Angular')):
        capabilities.append(('Component Architecture', 'Modular, reusable components for maintainable code'))
    if 'Next.js' in frameworks:
        capabilities.append(('Server-Side Rendering', 'Fast initial page loads and SEO optimization'))
    if 'TypeScript' in frameworks:
        capabilities.append(('Type Safety', 'Catch errors at compile time with static typing'))
    if analysis.has_tests:
        capabilities.append(('Quality Assurance', 'Comprehensive testing ensures reliability'))
    if analysis.has_ci:
        capabilities.append(('Automated Deployment', 'Continuous integration and deployment pipeline'))
    capabilities.append(('Modern Development', f"Built with {analysis.main_language} following best practices"))
    capabilities.append(('Developer Experience', 'Optimized tooling and development workflow'))
    return capabilities


def _feature_rows(repo_info: RepositoryInfo, analysis: RepositoryAnalysis) -> List[str]:
    frameworks = analysis.frameworks
    rows = [f"| 🚀 **Modern {repo_info.language}** | Built with latest {repo_info.language} features | ✅ |"]
    if 'React' in frameworks:
        rows.append("| ⚛️ **React UI** | Component-based architecture | ✅ |")
    if 'Django' in frameworks:
        rows.append("| 🐍 **Django** | Batteries-included web framework | ✅ |")
    if 'TypeScript' in frameworks:
        rows.append("| 📝 **Type Safety** | Full TypeScript support | ✅ |")
    if 'Tailwind CSS' in frameworks:
        rows.append("| 🎨 **Modern Styling** | Tailwind CSS for beautiful UI | ✅ |")
    if 'Next.js' in frameworks:
        rows.append("| ⚡ **Next.js** | Server-side rendering & optimization | ✅ |")
    if analysis.has_tests:
        rows.append("| 🧪 **Testing** | Comprehensive test coverage | ✅ |")
    if analysis.has_ci:
        rows.append("| 🔄 **CI/CD** | Automated workflows | ✅ |")
    rows.append("| 📱 **Responsive** | Mobile-first design | ✅ |")
    rows.append("| ⚡ **Performance** | Optimized for speed | ✅ |")
    rows.append("| 🔧 **Maintainable** | Clean, documented code | ✅ |")
    return rows


def render_basic_readme(repo_info: RepositoryInfo, analysis: RepositoryAnalysis) -> str:
    """
    Render the fixed-layout README used when no configuration is supplied.

    Always centred, always emoji headings, MIT license; no section toggles.
    """
    name, repo = repo_info.name, repo_info.full_name
    description = repo_info.description
    manager = analysis.package_manager
    lines = ['<div align="center">', '', f"# {name}", '']
    lines.append(f"### {description or f'A modern {analysis.project_type} project built with cutting-edge technologies'}")
    lines.append('')

    badges = [
        f"[![GitHub stars](https://img.shields.io/github/stars/{repo}?style=for-the-badge&logo=github)](https://github.com/{repo}/stargazers)",
        f"[![GitHub forks](https://img.shields.io/github/forks/{repo}?style=for-the-badge&logo=github)](https://github.com/{repo}/network)",
        f"[![GitHub issues](https://img.shields.io/github/issues/{repo}?style=for-the-badge&logo=github)](https://github.com/{repo}/issues)",
        f"[![GitHub license](https://img.shields.io/github/license/{repo}?style=for-the-badge)](https://github.com/{repo}/blob/{repo_info.default_branch}/LICENSE)",
    ]
    if _known_language(repo_info):
        badges.append(
            f"[![Language](https://img.shields.io/badge/language-{_shield_text(repo_info.language)}-blue"
            f"?style=for-the-badge&logo={quote(repo_info.language.lower())})](https://github.com/{repo})"
        )
    if analysis.has_tests:
        badges.append("![Tests](https://img.shields.io/badge/tests-included-brightgreen?style=for-the-badge&logo=github-actions)")
    if analysis.has_ci:
        badges.append("![CI/CD](https://img.shields.io/badge/CI%2FCD-enabled-blue?style=for-the-badge&logo=github-actions)")
    lines.extend([" ".join(badges), '</div>', '', '---', ''])

    toc = ['📋 About', '✨ Features']
    if analysis.frameworks:
        toc.insert(1, '🛠️ Tech Stack')
    toc.append('🚀 Getting Started')
    if analysis.structure:
        toc.append('📁 Project Structure')
    toc.extend(['🤝 Contributing', '📄 License'])
    lines.extend(['## 📚 Table of Contents', ''])
    lines.extend(f"- [{entry}](#{github_anchor(entry)})" for entry in toc)
    lines.append('')

    lines.extend(['## 📋 About', ''])
    if description:
        lines.append(description)
    else:
        built_with = ', '.join(analysis.frameworks) if analysis.frameworks else 'modern technologies'
        lines.append(
            f"This is a {analysis.project_type} project that demonstrates modern development practices and "
            f"clean architecture. Built with {repo_info.language} and featuring {built_with}, "
            "this project showcases best practices in software development."
        )
    lines.extend(['', '### 🎯 Key Highlights', ''])
    lines.append(f"- **Language**: {repo_info.language}")
    lines.append(f"- **Type**: {analysis.project_type}")
    if analysis.frameworks:
        lines.append(f"- **Frameworks**: {', '.join(analysis.frameworks)}")
    lines.append(f"- **Stars**: {repo_info.stars} ⭐")
    lines.append(f"- **Forks**: {repo_info.forks} 🍴")
    if analysis.has_tests:
        lines.append("- **Testing**: ✅ Comprehensive test suite")
    if analysis.has_ci:
        lines.append("- **CI/CD**: ✅ Automated workflows")
    lines.append('')

    if analysis.frameworks:
        lines.extend(['## 🛠️ Tech Stack', '', '<div align="center">', ''])
        tech_badges = []
        for framework in analysis.frameworks:
            logo, color = TECH_ICONS.get(framework, (framework.lower().replace(' ', ''), '666666'))
            tech_badges.append(
                f"![{framework}](https://img.shields.io/badge/{_shield_text(framework)}-{color}"
                f"?style=for-the-badge&logo={logo}&logoColor=white)"
            )
        lines.extend([" ".join(tech_badges), '', '</div>', '', '### Technologies Used', ''])
        lines.extend(f"- **{framework}** - {tech_description(framework)}" for framework in analysis.frameworks)
        lines.append('')

    lines.extend(['## ✨ Features', '', '<div align="center">', ''])
    lines.extend(['| Feature | Description | Status |', '|---------|-------------|--------|'])
    lines.extend(_feature_rows(repo_info, analysis))
    lines.extend(['', '</div>', '', '### 🎯 Core Capabilities', ''])
    lines.extend(f"- **{title}**: {text}" for title, text in _core_capabilities(analysis))
    lines.append('')

    lines.extend(['## 🚀 Getting Started', '', '### 📋 Prerequisites', ''])
    lines.extend(['Before you begin, ensure you have the following installed:', ''])
    lines.extend(f"- {badge}" for badge in PREREQUISITE_BADGES.get(manager, []) + [GIT_BADGE])
    lines.extend(['', '### 📦 Installation', '', 'Follow these steps to get the project running locally:', ''])
    lines.extend(['#### 1️⃣ Clone the Repository', '', '```bash', '# Clone the repository'])
    lines.extend([f"git clone https://github.com/{repo}.git", '', '# Navigate to project directory'])
    lines.extend([f"cd {name}", '```', ''])
    lines.extend(['#### 2️⃣ Install Dependencies', '', '```bash', install_command(analysis), '```', ''])

    start, quick = QUICK_START.get(manager, (None, None))
    lines.extend(['#### 3️⃣ Start the Application', '', '```bash'])
    if 'dev' in analysis.scripts:
        runner = SCRIPT_RUNNERS.get(manager, 'npm run')
        lines.extend(['# Start development server', f"{runner} dev"])
    elif start:
        lines.extend(['# Run the application', start])
    else:
        lines.extend(['# Run the application (check project documentation)',
                      '# Follow the specific run instructions for this project'])
    lines.extend(['```', '', '### ⚡ Quick Start', '', '```bash'])
    clone = f"git clone https://github.com/{repo}.git && cd {name}"
    if quick:
        lines.append(f"{clone} && {quick}")
    else:
        lines.extend([clone, '# Follow the installation and run instructions above'])
    lines.extend(['```', ''])

    if analysis.structure:
        lines.extend(['## 📁 Project Structure', '', '```', f"{name}/"])
        lines.extend(f"├── {directory}/" for directory in analysis.structure[:MAX_STRUCTURE_DIRS])
        lines.extend(['└── README.md', '```', ''])

    if analysis.scripts:
        runner = SCRIPT_RUNNERS.get(manager, 'npm run')
        lines.extend(['## 📜 Available Scripts', ''])
        lines.extend(f"- `{runner} {script}` - {script_description(script)}" for script in analysis.scripts)
        lines.append('')

    lines.extend(['## 🤝 Contributing', '', CONTRIBUTING_STEPS.rstrip('\n'), ''])
    lines.extend(['## 📄 License', '', _license_sentence('MIT').rstrip('\n'), ''])
    lines.extend([
        '## 🙏 Acknowledgments', '',
        '- Thanks to all contributors who have helped shape this project',
        '- Built with ❤️ using modern development practices',
        f"- Generated with [GitSpicefy]({GITSPICEFY_URL}) 🚀",
    ])
    return "\n".join(lines) + "\n"
