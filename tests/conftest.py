import base64
import json
from types import SimpleNamespace

import pytest

from gitspicefy.models import GitHubFile, RepositoryInfo

API = "https://api.github.com"


class FakeResponse:
    def __init__(self, status_code=200, payload=None, headers=None, text=None, reason='OK'):
        self.status_code = status_code
        self._payload = payload
        self.headers = headers or {}
        self.reason = reason
        if text is None:
            text = json.dumps(payload) if payload is not None else ''
        self.text = text

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Stands in for requests.Session; routes map URLs to responses, lists are served in order."""

    def __init__(self, routes=None, post_responses=None):
        self.headers = {}
        self.routes = routes or {}
        self.post_responses = list(post_responses or [])
        self.calls = []
        self.posts = []

    def _next(self, value):
        if isinstance(value, list):
            return value.pop(0) if len(value) > 1 else value[0]
        return value

    def get(self, url, params=None):
        self.calls.append((url, params))
        response = self._next(self.routes.get(url, FakeResponse(404, {'message': 'Not Found'})))
        if isinstance(response, Exception):
            raise response
        return response

    def post(self, url, headers=None, json=None):
        self.posts.append((url, headers, json))
        response = self._next(self.post_responses) if self.post_responses else FakeResponse(503, reason='Unavailable')
        if isinstance(response, Exception):
            raise response
        return response

    def requested(self, fragment):
        return [url for url, _ in self.calls if fragment in url]


def contents_url(path='', owner='octo', repo='demo'):
    return f"{API}/repos/{owner}/{repo}/contents/{path}"


def repo_payload(name='demo', owner='octo', language='Python', description='A demo project', **extra):
    payload = {
        'name': name,
        'full_name': f"{owner}/{name}",
        'description': description,
        'language': language,
        'stargazers_count': 42,
        'forks_count': 7,
        'private': False,
        'default_branch': 'main',
    }
    payload.update(extra)
    return payload


def repo_routes(tree, owner='octo', repo='demo', info=None, sizes=None):
    """
    Build contents-API routes for a fake repository.

    ``tree`` maps file paths to their text; directories are implied by the paths.
    """
    sizes = sizes or {}
    routes = {}
    listings = {'': {}}

    for path, content in tree.items():
        parts = path.split('/')
        for depth in range(len(parts)):
            parent = '/'.join(parts[:depth])
            child = '/'.join(parts[:depth + 1])
            listings.setdefault(parent, {})
            if depth == len(parts) - 1:
                size = sizes.get(path, len(content.encode('utf-8')))
                listings[parent][child] = {'name': parts[depth], 'path': child, 'type': 'file', 'size': size}
                routes[contents_url(child, owner, repo)] = FakeResponse(200, {
                    'name': parts[depth],
                    'path': child,
                    'encoding': 'base64',
                    'content': base64.b64encode(content.encode('utf-8')).decode('ascii'),
                })
            else:
                listings[parent][child] = {'name': parts[depth], 'path': child, 'type': 'dir', 'size': 0}

    for directory, entries in listings.items():
        routes[contents_url(directory, owner, repo)] = FakeResponse(200, list(entries.values()))

    routes[f"{API}/repos/{owner}/{repo}"] = FakeResponse(200, info or repo_payload(name=repo, owner=owner))
    return routes


def make_files(layout):
    """Build GitHubFile entries from {path: content}; a trailing '/' marks a directory."""
    files = []
    for path, content in layout.items():
        if path.endswith('/'):
            path = path.rstrip('/')
            files.append(GitHubFile(name=path.rsplit('/', 1)[-1], path=path, type='dir'))
        else:
            files.append(GitHubFile(name=path.rsplit('/', 1)[-1], path=path, type='file', content=content))
    return files


class FakeOpenAIClient:
    def __init__(self, content="# Demo\n\nGenerated by a model."):
        self.calls = []

        def create(**kwargs):
            self.calls.append(kwargs)
            message = SimpleNamespace(content=content)
            return SimpleNamespace(choices=[SimpleNamespace(message=message)])

        self.chat = SimpleNamespace(completions=SimpleNamespace(create=create))


@pytest.fixture
def python_repo():
    return RepositoryInfo(name='demo', full_name='octo/demo', language='Python',
                          description='A demo project', stars=42, forks=7)


@pytest.fixture
def django_files():
    return make_files({'requirements.txt': 'Django>=4.2\nrequests==2.31.0\n', 'manage.py': 'import django\n'})


@pytest.fixture
def react_files():
    package = {
        'name': 'web',
        'scripts': {'dev': 'vite', 'build': 'vite build', 'test': 'vitest'},
        'dependencies': {'react': '^18.2.0', 'react-dom': '^18.2.0'},
        'devDependencies': {'typescript': '^5.0.0', 'vite': '^5.0.0'},
    }
    return make_files({
        'package.json': json.dumps(package),
        'src/': None,
        'src/App.tsx': 'export default function App() {}',
        'vite.config.ts': 'export default {}',
    })


@pytest.fixture(autouse=True)
def no_credentials(monkeypatch):
    for name in ('GITHUB_TOKEN', 'OPENAI_API_KEY', 'OPENAI_MODEL', 'HUGGINGFACE_API_KEY'):
        monkeypatch.delenv(name, raising=False)
