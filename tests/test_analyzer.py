import json

from conftest import make_files
from gitspicefy.analyzer import (
    PROJECT_TYPE_RULES,
    FileIndex,
    analyze_repository,
    classify,
    parse_package_json,
    parse_requirements,
)
from gitspicefy.models import RepositoryInfo


def info(language='Python'):
    return RepositoryInfo(name='demo', full_name='octo/demo', language=language)


def test_django_project(django_files):
    analysis = analyze_repository(info('Python'), django_files)

    assert analysis.project_type == 'Django Application'
    assert analysis.package_manager == 'pip'
    assert analysis.main_language == 'Python'
    assert 'Django' in analysis.frameworks
    assert analysis.dependencies == ['Django', 'requests']


def test_django_without_contents():
    files = make_files({'requirements.txt': None, 'manage.py': None})
    analysis = analyze_repository(info('Python'), files)
    assert analysis.project_type == 'Django Application'
    assert analysis.package_manager == 'pip'


def test_react_dependency_detected(react_files):
    analysis = analyze_repository(info('TypeScript'), react_files)

    assert analysis.project_type == 'React Application'
    assert analysis.frameworks == ['React', 'TypeScript', 'Vite']
    assert analysis.package_manager == 'npm'
    assert analysis.build_tool == 'Vite'
    assert analysis.scripts == ['dev', 'build', 'test']
    assert 'react-dom' in analysis.dependencies
    assert analysis.structure == ['src']


def test_first_matching_rule_wins():
    files = make_files({
        'package.json': json.dumps({'dependencies': {'next': '14', 'react': '18'}}),
        'next.config.js': '',
        'src/App.js': '',
        'angular.json': '{}',
    })
    assert analyze_repository(info('JavaScript'), files).project_type == 'Next.js Application'


def test_node_manifest_precedes_python_manifest():
    files = make_files({'package.json': '{}', 'requirements.txt': 'flask\n', 'app.py': ''})
    analysis = analyze_repository(info('Python'), files)
    assert analysis.project_type == 'Node.js Application'


def test_package_managers():
    cases = [
        ({'package.json': '{}', 'yarn.lock': ''}, 'yarn'),
        ({'package.json': '{}', 'pnpm-lock.yaml': ''}, 'pnpm'),
        ({'Cargo.toml': ''}, 'Cargo'),
        ({'go.mod': ''}, 'Go Modules'),
        ({'README.md': ''}, 'Manual Setup'),
    ]
    for layout, expected in cases:
        assert analyze_repository(info('Unknown'), make_files(layout)).package_manager == expected


def test_language_fallbacks():
    go = analyze_repository(info('Go'), make_files({'main.go': 'package main'}))
    assert go.project_type == 'Go Project'
    assert go.package_manager == 'Go Modules'

    java = analyze_repository(info('Java'), make_files({'Main.java': ''}))
    assert java.package_manager == 'Maven/Gradle'

    haskell = analyze_repository(info('Haskell'), make_files({'Main.hs': ''}))
    assert haskell.project_type == 'Haskell Project'
    assert haskell.package_manager == 'Manual Setup'

    script = analyze_repository(info('Python'), make_files({'main.py': ''}))
    assert script.project_type == 'Python Application'
    assert analyze_repository(info('Python'), make_files({'tool.py': ''})).project_type == 'Python Project'


def test_manifest_project_types():
    assert analyze_repository(info('Rust'), make_files({'Cargo.toml': ''})).project_type == 'Rust Application'
    assert analyze_repository(info('PHP'), make_files({'composer.json': '{}'})).project_type == 'PHP Application'
    assert analyze_repository(info('Ruby'), make_files({'Gemfile': ''})).project_type == 'Ruby Application'
    flask = make_files({'pyproject.toml': '[project]\ndependencies = ["fastapi"]', 'main.py': ''})
    analysis = analyze_repository(info('Python'), flask)
    assert analysis.project_type == 'Flask/FastAPI Application'
    assert analysis.frameworks == ['FastAPI']


def test_features_and_flags():
    files = make_files({
        'src/': None,
        'src/api/routes.py': '',
        'tests/': None,
        'tests/test_routes.py': '',
        'Dockerfile': '',
        '.github/workflows/ci.yml': '',
        'docs/': None,
        'docs/index.md': '',
    })
    analysis = analyze_repository(info('Python'), files)

    for feature in ('RESTful API', 'Comprehensive Testing', 'Docker Support', 'CI/CD Pipeline'):
        assert feature in analysis.features
    assert 'Authentication' not in analysis.features
    assert analysis.has_tests
    assert analysis.has_ci
    assert analysis.has_docker
    assert analysis.has_documentation
    assert analysis.structure == ['src', 'tests', 'docs']


def test_structure_is_deduplicated():
    files = make_files({'lib/': None, 'pkg/lib/': None, 'lib/a.py': ''})
    assert analyze_repository(info(), files).structure == ['lib']


def test_empty_repository():
    analysis = analyze_repository(info('Unknown'), [])
    assert analysis.project_type == 'Unknown Project'
    assert analysis.frameworks == []
    assert analysis.structure == []
    assert not analysis.has_tests


def test_parse_package_json_invalid():
    assert parse_package_json('{not json') == {'dependencies': [], 'scripts': [], 'frameworks': []}
    assert parse_package_json('[]')['frameworks'] == []


def test_parse_package_json_angular_scoped_package():
    parsed = parse_package_json(json.dumps({'dependencies': {'@angular/core': '17', 'express': '4'}}))
    assert parsed['frameworks'] == ['Angular', 'Express.js']


def test_parse_requirements():
    content = "# web\nDjango>=4.2\n\n-r base.txt\nrequests[socks]==2.31.0 ; python_version > '3.8'\n"
    assert parse_requirements(content) == ['Django', 'requests']


def test_classify_uses_default():
    assert classify(PROJECT_TYPE_RULES, FileIndex([], 'Elixir'), 'fallback') == 'fallback'


def test_docker_files_are_not_documentation():
    files = make_files({'Dockerfile': '', 'docker-compose.yml': '', 'go.mod': ''})
    analysis = analyze_repository(info('Go'), files)
    assert analysis.has_docker
    assert not analysis.has_documentation


def test_readme_counts_as_documentation():
    assert analyze_repository(info('Go'), make_files({'README.md': '# x'})).has_documentation


def test_lockfiles_without_content_still_classify():
    files = make_files({'package.json': '{}', 'yarn.lock': None, 'Gemfile': None})
    assert analyze_repository(info('JavaScript'), files).package_manager == 'yarn'
