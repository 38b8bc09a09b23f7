# SPDX-License-Identifier: GPL-3.0-or-later


class TypeaheadError(Exception):
    """Base class for everything the HTTP layer reports as "not found"."""


class UnsupportedProviderError(TypeaheadError):
    pass


class InvalidArgument(TypeaheadError):
    pass


class ProviderError(TypeaheadError):
    """An upstream client call failed (network or API level)."""
