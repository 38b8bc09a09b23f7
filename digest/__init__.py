# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import dataclass
from typing import Any, List


@dataclass
class Subscriber:
    provider: str
    username: str
    name: str
    email: str
    timezone: str = ''


@dataclass
class MailContent:
    website_url: str
    user: str  # provider/username
    name: str
    data: List[Any]


@dataclass
class Recipient:
    name: str
    address: str
    username: str
    provider: str


@dataclass
class Email:
    subject: str
    text_body: str
    html_body: str
