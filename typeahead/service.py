# SPDX-License-Identifier: GPL-3.0-or-later

from typing import Dict, List, Union

from typeahead import Adapter, BranchListing, Provider, RepositoryMatch, query
from typeahead.errors import InvalidArgument, UnsupportedProviderError


class TypeaheadService:
    """
    Repository and branch typeahead on top of the provider adapters.
    Adapter errors are never retried, they propagate to the caller as is.
    """

    def __init__(self, adapters: Dict[Provider, Adapter]) -> None:
        self._adapters = adapters

    def _adapter(self, provider: Provider) -> Adapter:
        adapter = self._adapters.get(provider)
        if adapter is None:
            raise UnsupportedProviderError(f"No adapter for provider {provider.value}")
        return adapter

    def search(self, provider: Union[Provider, str], token: str,
               raw_query: str) -> List[RepositoryMatch]:
        provider = Provider.parse(provider)
        adapter = self._adapter(provider)
        return adapter.search(token, query.normalize(provider, raw_query))

    def branches(self, provider: Union[Provider, str], token: str,
                 full_name: str) -> BranchListing:
        if not full_name:
            raise InvalidArgument("Missing repository name")

        provider = Provider.parse(provider)
        adapter = self._adapter(provider)

        # Without a default branch the listing is useless, so fail early
        default_branch = adapter.default_branch(token, full_name)
        return BranchListing(default_branch, adapter.branches(token, full_name))
