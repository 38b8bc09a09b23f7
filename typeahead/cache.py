# SPDX-License-Identifier: GPL-3.0-or-later

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from typing import Dict, Optional

from typeahead import Provider

DEVELOPMENT_MODES = {'dev', 'development'}

CACHE_DURATION = timedelta(days=1)


def should_cache(provider: Provider, run_mode: str) -> bool:
    # GitLab responses are never cached
    return run_mode not in DEVELOPMENT_MODES and provider is not Provider.GITLAB


class CachePolicy:
    def __init__(self, run_mode: str) -> None:
        self.run_mode = run_mode

    def should_cache(self, provider: Provider) -> bool:
        return should_cache(provider, self.run_mode)

    @staticmethod
    def headers(now: Optional[datetime] = None) -> Dict[str, str]:
        if now is None:
            now = datetime.now(timezone.utc)
        return {
            'Expires': format_datetime(now + CACHE_DURATION, usegmt=True),
            'Cache-Control': f"max-age:{int(CACHE_DURATION.total_seconds())}, public",
            'Last-Modified': format_datetime(now, usegmt=True),
        }
