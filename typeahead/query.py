# SPDX-License-Identifier: GPL-3.0-or-later

import string
from typing import Optional, Tuple

from typeahead import Provider
from typeahead.errors import UnsupportedProviderError

# Besides letters of any script (str.isalpha), only ASCII digits,
# '_' and '-' are part of an owner. Names may contain '.' as well.
_OWNER_CHARS = frozenset(string.digits + '_-')
_NAME_CHARS = _OWNER_CHARS | {'.'}


def _owner_repo(query: str) -> Optional[Tuple[int, int]]:
    """Return the span of the first "owner/partial-name" in the query."""
    start = 0
    for i, c in enumerate(query):
        if c == '/':
            if start < i:
                end = i + 1
                while end < len(query) and (query[end].isalpha() or query[end] in _NAME_CHARS):
                    end += 1
                return start, end
            start = i + 1
        elif not (c.isalpha() or c in _OWNER_CHARS):
            start = i + 1
    return None


def _normalize_github(query: str) -> str:
    # GitHub search terms are joined with '+'
    query = query.replace(' ', '+')
    span = _owner_repo(query)
    if not span:
        return query

    start, end = span
    owner, name = query[start:end].split('/', 1)
    return query[:start] + f"{name}+user:{owner}" + query[end:]


def normalize(provider: Provider, query: str) -> str:
    """
    Rewrite a free-text typeahead query into the search syntax of the provider.
    Only the first "owner/name" pattern is turned into a GitHub user qualifier.
    """
    if provider is Provider.GITHUB:
        return _normalize_github(query)
    if provider is Provider.GITLAB:
        return query
    raise UnsupportedProviderError(f"Unsupported provider: {provider!r}")
