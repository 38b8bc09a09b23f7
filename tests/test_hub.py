# SPDX-License-Identifier: GPL-3.0-or-later

from unittest import mock

import pytest
import requests
from github3.exceptions import NotFoundError

from typeahead import RepositoryMatch
from typeahead.errors import ProviderError
from typeahead.hub import GitHubAdapter


def _result(**data):
    r = mock.Mock()
    r.repository.as_dict.return_value = data
    return r


def _branch(name):
    b = mock.Mock()
    b.name = name
    return b


@pytest.fixture
def gh():
    return mock.Mock()


@pytest.fixture
def adapter(gh):
    return GitHubAdapter(connect=lambda token: gh)


def test_search(adapter, gh):
    gh.search_repositories.return_value = iter([
        _result(name='partial', full_name='owner/partial',
                description='Desc', homepage='https://example.org'),
        _result(name='other', full_name='owner/other', description=None, homepage=None),
    ])
    assert adapter.search('t', 'partial+user:owner') == [
        RepositoryMatch('partial', 'owner/partial', 'Desc', 'https://example.org'),
        RepositoryMatch('other', 'owner/other', '', ''),
    ]
    gh.search_repositories.assert_called_once_with('partial+user:owner', number=30)


def test_connect_with_token(gh):
    tokens = []

    def connect(token):
        tokens.append(token)
        return gh

    gh.search_repositories.return_value = iter([])
    GitHubAdapter(connect=connect).search('secret', 'x')
    assert tokens == ['secret']


def test_search_network_error(adapter, gh):
    gh.search_repositories.side_effect = requests.ConnectionError('down')
    with pytest.raises(ProviderError) as e:
        adapter.search('t', 'x')
    assert isinstance(e.value.__cause__, requests.ConnectionError)


def test_default_branch(adapter, gh):
    gh.repository.return_value.default_branch = 'master'
    assert adapter.default_branch('t', 'owner/repo') == 'master'
    gh.repository.assert_called_once_with('owner', 'repo')


def test_default_branch_not_found(adapter, gh):
    response = mock.Mock(status_code=404)
    response.json.return_value = {'message': 'Not Found'}
    gh.repository.side_effect = NotFoundError(response)
    with pytest.raises(ProviderError):
        adapter.default_branch('t', 'owner/missing')


def test_branches(adapter, gh):
    gh.repository.return_value.branches.return_value = iter(
        [_branch('master'), _branch('feature')])
    assert adapter.branches('t', 'owner/repo') == ['master', 'feature']


def test_branches_error(adapter, gh):
    gh.repository.return_value.branches.side_effect = requests.Timeout()
    with pytest.raises(ProviderError):
        adapter.branches('t', 'owner/repo')


@pytest.mark.parametrize('full_name', ['foo', 'foo/', '/bar', ''])
def test_default_branch_incomplete_name(adapter, gh, full_name):
    gh.repository.return_value = None
    with pytest.raises(ProviderError):
        adapter.default_branch('t', full_name)
    gh.repository.assert_not_called()


def test_branches_incomplete_name(adapter, gh):
    with pytest.raises(ProviderError):
        adapter.branches('t', 'foo')
    gh.repository.assert_not_called()


def test_repository_missing(adapter, gh):
    gh.repository.return_value = None
    with pytest.raises(ProviderError):
        adapter.default_branch('t', 'owner/repo')
    with pytest.raises(ProviderError):
        adapter.branches('t', 'owner/repo')


def test_default_branch_empty_repository(adapter, gh):
    gh.repository.return_value.default_branch = None
    with pytest.raises(ProviderError):
        adapter.default_branch('t', 'owner/empty')
