"""Where the active URL comes from, and how to move to another one.

The resolver never inspects its runtime environment. It asks a
:class:`Location` for the current path and tells it to navigate; a request
handler injects a :class:`RequestLocation`, everything else gets the
:class:`StaticLocation` stub.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from starlette.requests import Request
from starlette.responses import RedirectResponse


@runtime_checkable
class Location(Protocol):
    @property
    def path(self) -> str | None: ...

    @property
    def query(self) -> str: ...

    @property
    def fragment(self) -> str: ...

    def navigate(self, url: str) -> None: ...


class StaticLocation:
    """Fixed location for code running outside a request.

    ``path`` is ``None`` by default, meaning there is no addressable URL and
    the default language always applies. ``navigate`` does nothing.
    """

    def __init__(self, path: str | None = None, query: str = "", fragment: str = "") -> None:
        self._path = path
        self._query = query
        self._fragment = fragment

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def query(self) -> str:
        return self._query

    @property
    def fragment(self) -> str:
        return self._fragment

    def navigate(self, url: str) -> None:
        return None

    def __repr__(self) -> str:
        return f"StaticLocation(path={self._path!r})"


class RequestLocation:
    """Location backed by an incoming Starlette request.

    Browsers never send the fragment, so it is always empty here.
    ``navigate`` only records the target; :meth:`redirect` (or
    ``LanguageMiddleware``) turns it into a response.
    """

    def __init__(self, request: Request, status_code: int = 303) -> None:
        self._request = request
        self._status_code = status_code
        self.redirect_url: str | None = None

    @property
    def path(self) -> str:
        return self._request.url.path

    @property
    def query(self) -> str:
        return self._request.url.query

    @property
    def fragment(self) -> str:
        return ""

    def navigate(self, url: str) -> None:
        self.redirect_url = url

    def redirect(self) -> RedirectResponse | None:
        """Return a redirect to the recorded target, if any."""
        if self.redirect_url is None:
            return None
        return RedirectResponse(self.redirect_url, status_code=self._status_code)

    def __repr__(self) -> str:
        return f"RequestLocation(path={self.path!r})"
