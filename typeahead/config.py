# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass

from urllib3.util import parse_url

from typeahead.cache import DEVELOPMENT_MODES
from typeahead.lab import GITLAB_URL


@dataclass(frozen=True)
class Settings:
    run_mode: str = 'production'
    gitlab_url: str = GITLAB_URL
    server_proto: str = 'https'
    server_host: str = 'localhost'

    @property
    def development(self) -> bool:
        return self.run_mode in DEVELOPMENT_MODES

    @property
    def website_url(self) -> str:
        # Older configurations stored the protocol as "https://"
        proto = self.server_proto.rstrip(':/')
        return parse_url(f"{proto}://{self.server_host}").url
