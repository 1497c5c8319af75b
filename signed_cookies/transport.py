"""Cookie transports: a FastAPI request/response adapter and an in-memory pair."""
from fastapi import Request, Response
from .cookie import Cookie


class StarletteReadWriter:
    """Read cookies from a request and append Set-Cookie headers to a response."""

    def __init__(self, request: Request, response: Response) -> None:
        self.request = request
        self.response = response

    def cookie(self, name: str) -> Cookie | None:
        value = self.request.cookies.get(name)
        if value is None:
            return None
        return Cookie(name=name, value=value)

    def set_cookie(self, cookie: Cookie) -> None:
        # append, never replace: a value cookie and its signature share a header name
        self.response.headers.append("set-cookie", cookie.serialize())


class MemoryReadWriter:
    """In-memory request/response pair.

    ``request_cookies`` maps incoming cookie names to values and
    ``response_cookies`` collects every cookie written, in order.
    """

    def __init__(self, request_cookies: dict[str, str] | None = None) -> None:
        self.request_cookies: dict[str, str] = dict(request_cookies or {})
        self.response_cookies: list[Cookie] = []

    def add_cookie(self, cookie: Cookie) -> None:
        """Add ``cookie`` to the incoming request."""
        self.request_cookies[cookie.name] = cookie.value

    def cookie(self, name: str) -> Cookie | None:
        if name not in self.request_cookies:
            return None
        return Cookie(name=name, value=self.request_cookies[name])

    def set_cookie(self, cookie: Cookie) -> None:
        self.response_cookies.append(cookie)

    @property
    def headers(self) -> list[str]:
        """Serialized Set-Cookie header values, in write order."""
        return [cookie.serialize() for cookie in self.response_cookies]

    def follow(self) -> "MemoryReadWriter":
        """Build the next request the way a browser would, from this response.

        Cookies written to the response replace incoming ones of the same
        name; cookies with a negative max-age are dropped.
        """
        jar = dict(self.request_cookies)
        for cookie in self.response_cookies:
            if cookie.max_age < 0:
                jar.pop(cookie.name, None)
            else:
                jar[cookie.name] = cookie.value
        return MemoryReadWriter(jar)
