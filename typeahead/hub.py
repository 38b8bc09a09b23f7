# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Callable, List

import requests
from github3 import GitHub
from github3.exceptions import GitHubError
from github3.repos.repo import Repository

from typeahead import Adapter, RepositoryMatch
from typeahead.errors import ProviderError

# Same as the default page size of the GitHub search API
_SEARCH_LIMIT = 30

_CLIENT_ERRORS = (GitHubError, requests.RequestException)


def _connect(token: str) -> GitHub:
    return GitHub(token=token)


def _match(d: dict) -> RepositoryMatch:
    return RepositoryMatch(d['name'], d['full_name'],
                           d.get('description') or '', d.get('homepage') or '')


class GitHubAdapter(Adapter):
    def __init__(self, connect: Callable[[str], GitHub] = _connect) -> None:
        self._connect = connect

    def _repository(self, token: str, full_name: str) -> Repository:
        owner, _, name = full_name.partition('/')
        # github3 returns None without a request when owner or name is empty
        r = self._connect(token).repository(owner, name) if owner and name else None
        if r is None:
            raise ProviderError(f"Invalid GitHub repository name: {full_name!r}")
        return r

    def search(self, token: str, query: str) -> List[RepositoryMatch]:
        gh = self._connect(token)
        try:
            # The search results are full repository objects, but github3 only
            # exposes a ShortRepository (no homepage), so use the raw JSON
            return [_match(r.repository.as_dict())
                    for r in gh.search_repositories(query, number=_SEARCH_LIMIT)]
        except _CLIENT_ERRORS as e:
            raise ProviderError(f"GitHub repository search failed: {e}") from e

    def default_branch(self, token: str, full_name: str) -> str:
        try:
            default_branch = self._repository(token, full_name).default_branch
        except _CLIENT_ERRORS as e:
            raise ProviderError(f"Fetching GitHub repository {full_name} failed: {e}") from e

        if not default_branch:
            raise ProviderError(f"GitHub repository {full_name} has no default branch")
        return default_branch

    def branches(self, token: str, full_name: str) -> List[str]:
        # The default branch is listed here as well
        try:
            return [b.name for b in self._repository(token, full_name).branches()]
        except _CLIENT_ERRORS as e:
            raise ProviderError(f"Fetching GitHub branches of {full_name} failed: {e}") from e
