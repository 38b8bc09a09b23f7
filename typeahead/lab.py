# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Callable, List

import requests
from gitlab import Gitlab
from gitlab.exceptions import GitlabError

from typeahead import Adapter, RepositoryMatch
from typeahead.errors import ProviderError

GITLAB_URL = 'https://gitlab.com'

# Number of projects returned for a single typeahead search
_SEARCH_LIMIT = 20

_CLIENT_ERRORS = (GitlabError, requests.RequestException)


class GitLabAdapter(Adapter):
    def __init__(self, url: str = GITLAB_URL,
                 connect: Callable[..., Gitlab] = Gitlab) -> None:
        self._url = url
        self._connect = connect

    def _gitlab(self, token: str) -> Gitlab:
        return self._connect(self._url, oauth_token=token, per_page=_SEARCH_LIMIT)

    def search(self, token: str, query: str) -> List[RepositoryMatch]:
        try:
            with self._gitlab(token) as gl:
                # Only the first page, the caller is typing
                return [RepositoryMatch(p.path, p.path_with_namespace,
                                        p.description or '', p.web_url or '')
                        for p in gl.projects.list(search=query, get_all=False)]
        except _CLIENT_ERRORS as e:
            raise ProviderError(f"GitLab project search failed: {e}") from e

    def default_branch(self, token: str, full_name: str) -> str:
        try:
            with self._gitlab(token) as gl:
                default_branch = gl.projects.get(full_name).default_branch
        except _CLIENT_ERRORS as e:
            raise ProviderError(f"Fetching GitLab project {full_name} failed: {e}") from e

        # Empty projects have no default branch
        if not default_branch:
            raise ProviderError(f"GitLab project {full_name} has no default branch")
        return default_branch

    def branches(self, token: str, full_name: str) -> List[str]:
        # Branch names only, the refs are not needed for the typeahead
        try:
            with self._gitlab(token) as gl:
                p = gl.projects.get(full_name, lazy=True)
                return [b.name for b in p.branches.list(iterator=True)]
        except _CLIENT_ERRORS as e:
            raise ProviderError(f"Fetching GitLab branches of {full_name} failed: {e}") from e
