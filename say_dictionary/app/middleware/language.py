"""URL-prefix language middleware."""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from say_dictionary.app.core.context import bind_location, reset_location
from say_dictionary.app.core.i18n import Resolver, get_resolver
from say_dictionary.app.core.location import RequestLocation


class LanguageMiddleware(BaseHTTPMiddleware):
    """Bind the request URL as the resolver's location.

    Exposes ``request.state.location`` and ``request.state.language`` and
    echoes the language via the ``Content-Language`` header. When the
    endpoint calls ``set_language`` the response becomes a redirect to the
    rewritten URL.
    """

    def __init__(self, app: ASGIApp, resolver: Resolver | None = None) -> None:
        super().__init__(app)
        self._resolver = resolver

    @property
    def resolver(self) -> Resolver:
        return self._resolver or get_resolver()

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        location = RequestLocation(request)
        request.state.location = location
        token = bind_location(location)
        try:
            resolver = self.resolver
            language = resolver.get_language() if resolver.initialized else None
            request.state.language = language

            response = await call_next(request)
        finally:
            reset_location(token)

        redirect = location.redirect()
        if redirect is not None:
            return redirect
        if language:
            response.headers["Content-Language"] = language
        return response
