# SPDX-License-Identifier: GPL-3.0-or-later

from dataclasses import asdict, dataclass
from typing import Callable, Optional

from fastapi import Depends, FastAPI, Header, HTTPException, Request, Response

from typeahead import Provider
from typeahead.cache import CachePolicy
from typeahead.errors import TypeaheadError
from typeahead.service import TypeaheadService


@dataclass
class Caller:
    provider: str
    token: str

    def __str__(self) -> str:
        # Never print the token
        return f"{self.provider} user"


def caller_from_headers(x_provider: Optional[str] = Header(None),
                        authorization: Optional[str] = Header(None)) -> Caller:
    """Stand-in for the login session: "X-Provider" and "Authorization: token <t>"."""
    if not x_provider or not authorization:
        raise HTTPException(status_code=401, detail="Not logged in")

    scheme, _, token = authorization.partition(' ')
    if scheme.lower() not in ('token', 'bearer') or not token:
        raise HTTPException(status_code=401, detail="Not logged in")

    return Caller(x_provider, token.strip())


def _repo_param(request: Request) -> str:
    values = request.query_params.getlist('repo')
    return values[0] if values else ''


def _not_found(what: str, caller: Caller, e: TypeaheadError) -> HTTPException:
    # Upstream details are for the log only
    print(f"ERROR: {what} for {caller} failed: {e}")
    return HTTPException(status_code=404, detail="Not Found")


def create_app(service: TypeaheadService, cache: CachePolicy,
               identify: Callable[..., Caller] = caller_from_headers) -> FastAPI:
    app = FastAPI(title="GitNotify typeahead")

    def _cache(response: Response, caller: Caller) -> None:
        if cache.should_cache(Provider.parse(caller.provider)):
            response.headers.update(cache.headers())

    @app.get('/typeahead/repo')
    def repo_typeahead(request: Request, response: Response,
                       caller: Caller = Depends(identify)):
        try:
            result = service.search(caller.provider, caller.token, _repo_param(request))
        except TypeaheadError as e:
            raise _not_found("Repository search", caller, e)

        _cache(response, caller)
        return [asdict(r) for r in result]

    @app.get('/typeahead/branch')
    def branch_typeahead(request: Request, response: Response,
                         caller: Caller = Depends(identify)):
        try:
            listing = service.branches(caller.provider, caller.token, _repo_param(request))
        except TypeaheadError as e:
            raise _not_found("Branch lookup", caller, e)

        _cache(response, caller)
        return asdict(listing)

    return app
