import pytest

from gitspicefy.errors import InvalidInputError
from gitspicefy.models import GenerationResult, GitHubFile, ReadmeConfig, RepositoryInfo, SectionToggles


def test_config_defaults():
    config = ReadmeConfig()
    assert config.header_alignment == 'center'
    assert config.ai_provider == 'local'
    assert config.license_type == 'MIT'
    assert config.badge_style == 'for-the-badge'
    assert not config.sections.project_ideas
    assert not config.sections.roadmap


def test_config_from_camel_case():
    config = ReadmeConfig.from_dict({
        'headerAlignment': 'right',
        'tableOfContentsStyle': 'numbered',
        'addEmojisToHeadings': False,
        'customFeatures': ['Fast'],
        'sections': {'techStack': False, 'projectIdeas': True, 'unknownSection': True},
        'somethingElse': 1,
    })

    assert config.header_alignment == 'right'
    assert config.table_of_contents_style == 'numbered'
    assert not config.add_emojis_to_headings
    assert config.custom_features == ['Fast']
    assert not config.sections.tech_stack
    assert config.sections.project_ideas
    assert config.sections.features


@pytest.mark.parametrize("data", [
    {'headerAlignment': 'justify'},
    {'aiProvider': 'cohere'},
    {'licenseType': 'WTFPL'},
    {'badgeStyle': 'social'},
])
def test_config_rejects_unknown_choices(data):
    with pytest.raises(InvalidInputError):
        ReadmeConfig.from_dict(data)


def test_enabled_sections():
    toggles = SectionToggles(features=False, roadmap=True)
    enabled = toggles.enabled()
    assert 'roadmap' in enabled
    assert 'features' not in enabled
    assert 'badges' in enabled


def test_repository_info_from_api():
    info = RepositoryInfo.from_api({
        'name': 'demo', 'full_name': 'octo/demo', 'description': None, 'language': None,
        'stargazers_count': 3, 'forks_count': 1, 'private': False, 'default_branch': 'trunk',
    })
    assert info.html_url == 'https://github.com/octo/demo'
    assert info.to_dict() == {
        'name': 'demo',
        'fullName': 'octo/demo',
        'description': '',
        'language': 'Unknown',
        'stars': 3,
        'forks': 1,
        'isPrivate': False,
        'defaultBranch': 'trunk',
    }


def test_generation_result_omits_file_contents():
    result = GenerationResult(
        readme='# demo',
        repository=RepositoryInfo(name='demo', full_name='octo/demo'),
        files=[GitHubFile(name='a.py', path='src/a.py', type='file', size=10, content='secret')],
    )
    assert result.to_dict()['files'] == [{'name': 'a.py', 'path': 'src/a.py', 'type': 'file'}]
