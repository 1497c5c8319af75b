"""Tests for the cookie transports."""

from __future__ import annotations

from fastapi import Request, Response

from signed_cookies import Cookie, MemoryReadWriter, StarletteReadWriter


def _request(cookie_header: str | None) -> Request:
    headers = []
    if cookie_header is not None:
        headers.append((b"cookie", cookie_header.encode("latin-1")))
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


def test_starlette_reads_request_cookies() -> None:
    rw = StarletteReadWriter(_request("jt=myCookie; jt.sig=abc"), Response())
    assert rw.cookie("jt") == Cookie(name="jt", value="myCookie")
    assert rw.cookie("jt.sig").value == "abc"
    assert rw.cookie("missing") is None


def test_starlette_appends_set_cookie_headers() -> None:
    response = Response()
    rw = StarletteReadWriter(_request(None), response)
    rw.set_cookie(Cookie(name="jt", value="myCookie", path="/"))
    rw.set_cookie(Cookie(name="jt.sig", value="abc", path="/"))
    assert response.headers.getlist("set-cookie") == [
        "jt=myCookie; Path=/",
        "jt.sig=abc; Path=/",
    ]


def test_memory_keeps_every_written_cookie() -> None:
    rw = MemoryReadWriter({"jt": "old"})
    rw.set_cookie(Cookie(name="jt", value="a"))
    rw.set_cookie(Cookie(name="jt", value="b"))
    assert rw.headers == ["jt=a", "jt=b"]
    # writes never change the incoming request
    assert rw.cookie("jt").value == "old"


def test_memory_follow_applies_response_to_jar() -> None:
    rw = MemoryReadWriter({"keep": "1", "replace": "old", "drop": "x"})
    rw.set_cookie(Cookie(name="replace", value="new"))
    rw.set_cookie(Cookie(name="drop", value="", max_age=-1))
    rw.set_cookie(Cookie(name="added", value="2"))

    following = rw.follow()
    assert following.request_cookies == {"keep": "1", "replace": "new", "added": "2"}
    assert following.response_cookies == []


def test_starlette_writes_ascii_header_for_non_latin1_value() -> None:
    response = Response()
    rw = StarletteReadWriter(_request(None), response)
    rw.set_cookie(Cookie(name="jt", value="€;x", path="/"))
    assert response.headers.getlist("set-cookie") == ["jt=x; Path=/"]
