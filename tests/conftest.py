# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Dict, List, Optional

import pytest

from typeahead import Adapter, RepositoryMatch
from typeahead.errors import ProviderError


class FakeAdapter(Adapter):
    """Records every call, fails the operations listed in ``fail``."""

    def __init__(self, matches: Optional[List[RepositoryMatch]] = None,
                 default: str = 'main', branch_names: Optional[List[str]] = None,
                 fail: frozenset = frozenset()) -> None:
        self.matches = matches or []
        self.default = default
        self.branch_names = branch_names if branch_names is not None else ['main', 'dev']
        self.fail = fail
        self.calls: Dict[str, list] = {'search': [], 'default_branch': [], 'branches': []}

    def _call(self, op: str, *args) -> None:
        self.calls[op].append(args)
        if op in self.fail:
            raise ProviderError(f"{op} failed")

    @property
    def call_count(self) -> int:
        return sum(len(c) for c in self.calls.values())

    def search(self, token, query):
        self._call('search', token, query)
        return self.matches

    def default_branch(self, token, full_name):
        self._call('default_branch', token, full_name)
        return self.default

    def branches(self, token, full_name):
        self._call('branches', token, full_name)
        return self.branch_names


@pytest.fixture
def github():
    return FakeAdapter(matches=[
        RepositoryMatch('partial', 'owner/partial', 'A repository', 'https://example.org'),
    ])


@pytest.fixture
def gitlab():
    return FakeAdapter(branch_names=['dev'])
