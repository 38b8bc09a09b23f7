# SPDX-License-Identifier: GPL-3.0-or-later

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from typeahead.errors import UnsupportedProviderError


class Provider(Enum):
    GITHUB = 'github'
    GITLAB = 'gitlab'

    @classmethod
    def parse(cls, value: Union['Provider', str]) -> 'Provider':
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedProviderError(f"Unsupported provider: {value!r}") from None


@dataclass
class RepositoryMatch:
    name: str
    full_name: str
    description: str
    homepage: str


@dataclass
class BranchListing:
    default_branch: str
    # May or may not repeat default_branch, depending on the provider
    branches: List[str]


class Adapter(ABC):
    @abstractmethod
    def search(self, token: str, query: str) -> List[RepositoryMatch]:
        ...

    @abstractmethod
    def default_branch(self, token: str, full_name: str) -> str:
        ...

    @abstractmethod
    def branches(self, token: str, full_name: str) -> List[str]:
        ...
