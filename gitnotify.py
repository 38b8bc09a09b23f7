#!/usr/bin/env python3
# SPDX-License-Identifier: GPL-3.0-or-later

import argparse

import uvicorn
from urllib3.util import parse_url

from typeahead import Provider
from typeahead.cache import CachePolicy
from typeahead.config import Settings
from typeahead.hub import GitHubAdapter
from typeahead.lab import GITLAB_URL, GitLabAdapter
from typeahead.service import TypeaheadService
from typeahead.web import create_app

parser = argparse.ArgumentParser(description="Serve repository and branch typeahead for GitNotify")
parser.add_argument('--run-mode', default='production',
                    help="Run mode, responses are not cached in 'dev' mode")
parser.add_argument('--gitlab-url', default=GITLAB_URL, help="GitLab instance to search")
parser.add_argument('--server-proto', default='https', help="Protocol of the public website")
parser.add_argument('--server-host', default='localhost',
                    help="Host name (and port) of the public website")
parser.add_argument('--host', default='127.0.0.1', help="Address to listen on")
parser.add_argument('--port', type=int, default=8000, help="Port to listen on")
args = parser.parse_args()

settings = Settings(args.run_mode, parse_url(args.gitlab_url).url,
                    args.server_proto, args.server_host)
if settings.development:
    print("NOTE: Running in development mode, typeahead responses are not cached")

service = TypeaheadService({
    Provider.GITHUB: GitHubAdapter(),
    Provider.GITLAB: GitLabAdapter(settings.gitlab_url),
})
app = create_app(service, CachePolicy(settings.run_mode))

print(f"Serving typeahead for {settings.website_url} on {args.host}:{args.port}")
uvicorn.run(app, host=args.host, port=args.port)
