# SPDX-License-Identifier: GPL-3.0-or-later

from datetime import datetime, timezone, tzinfo
from typing import Any, Callable, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from digest import Email, MailContent, Recipient, Subscriber

SUBJECT = "[GitNotify] New Updates from your Repositories - "

HTML_TEMPLATE = 'changes_mail'
TEXT_TEMPLATE = 'changes_mail_text'

_MONTHS = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
           'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')

Render = Callable[[str, MailContent], str]
Send = Callable[[Recipient, Email], None]


def _timezone(name: str) -> tzinfo:
    if not name:
        return timezone.utc
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        print(f"WARNING: Unknown time zone {name!r}, using UTC")
        return timezone.utc


def _collapse(text: str) -> str:
    # Templates leave a lot of empty lines behind, twice catches most of them
    return text.replace("\n\n", "\n").replace("\n\n", "\n")


def subject(now: datetime, tz: str) -> str:
    t = now.astimezone(_timezone(tz))
    # Not strftime's %b, the month names must not follow the locale
    return SUBJECT + f"{t.day:02d} {_MONTHS[t.month - 1]} {t.year} | {t.hour:02d} Hrs"


class Mailer:
    def __init__(self, website_url: str, render: Render, send: Send) -> None:
        self._website_url = website_url
        self._render = render
        self._send = send

    def process(self, diffs: List[Any], s: Subscriber,
                now: Optional[datetime] = None) -> Email:
        content = MailContent(self._website_url, f"{s.provider}/{s.username}", s.name, diffs)

        if now is None:
            now = datetime.now(timezone.utc)

        email = Email(subject(now, s.timezone),
                      _collapse(self._render(TEXT_TEMPLATE, content)),
                      self._render(HTML_TEMPLATE, content))

        print(f"Sending update mail to {s.provider}/{s.username}")
        self._send(Recipient(s.name, s.email, s.username, s.provider), email)
        return email
