"""Small WSGI applications that echo requests, count them and draw figures."""

from __future__ import annotations

import argparse
import io
import sys
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote
from wsgiref.simple_server import make_server

from kitbag.format import _quote
from kitbag.images import lissajous
from kitbag.params import ParamError, _parse_query, unpack

StartResponse = Callable[..., Any]
Environ = dict[str, Any]

_TEXT = "text/plain; charset=utf-8"
_FORM_TYPE = "application/x-www-form-urlencoded"
_BODY_METHODS = {"POST", "PUT", "PATCH"}
_PATH_SAFE = "/:@!$&'()*+,;=-._~"


def _respond(
    start_response: StartResponse,
    body: str | bytes,
    status: str = "200 OK",
    content_type: str = _TEXT,
) -> list[bytes]:
    data = body.encode("utf-8") if isinstance(body, str) else body
    start_response(
        status,
        [("Content-Type", content_type), ("Content-Length", str(len(data)))],
    )
    return [data]


def _not_found(start_response: StartResponse) -> list[bytes]:
    return _respond(start_response, "404 page not found\n", "404 Not Found")


def _path(environ: Environ) -> str:
    raw = environ.get("PATH_INFO", "") or "/"
    return raw.encode("latin-1").decode("utf-8", "replace")


def _request_uri(environ: Environ) -> str:
    uri = quote(_path(environ), safe=_PATH_SAFE)
    query = environ.get("QUERY_STRING", "")
    return f"{uri}?{query}" if query else uri


def _canonical(key: str) -> str:
    return "-".join(part.capitalize() for part in key.lower().split("_"))


def _headers(environ: Environ) -> dict[str, list[str]]:
    headers: dict[str, list[str]] = {}
    for key, value in environ.items():
        if key.startswith("HTTP_") and key != "HTTP_HOST":
            headers[_canonical(key[5:])] = [value]
        elif key in ("CONTENT_TYPE", "CONTENT_LENGTH") and value:
            headers[_canonical(key)] = [value]
    return headers


def _remote_addr(environ: Environ) -> str:
    addr = environ.get("REMOTE_ADDR", "")
    port = environ.get("REMOTE_PORT")
    return f"{addr}:{port}" if port else addr


def _form(environ: Environ) -> dict[str, list[str]]:
    """Request parameters: form-encoded body values first, then query values."""
    form: dict[str, list[str]] = {}
    method = environ.get("REQUEST_METHOD", "GET").upper()
    content_type = environ.get("CONTENT_TYPE", "").split(";")[0].strip().lower()
    if method in _BODY_METHODS and content_type == _FORM_TYPE:
        try:
            length = int(environ.get("CONTENT_LENGTH") or 0)
        except ValueError:
            length = 0
        body = environ["wsgi.input"].read(length) if length > 0 else b""
        form = _parse_query(body.decode("utf-8", "replace"))
    for key, values in _parse_query(environ.get("QUERY_STRING", "")).items():
        form.setdefault(key, []).extend(values)
    return form


def _quote_list(values: Iterable[str]) -> str:
    return "[" + " ".join(_quote(v) for v in values) + "]"


def echo_app(environ: Environ, start_response: StartResponse) -> list[bytes]:
    """Echo the path component of the requested URL."""
    return _respond(start_response, f"URL.Path = {_quote(_path(environ))}\n")


class CountingApp:
    """Echo the request path and count requests; ``/count`` reports the count."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._count = 0

    @property
    def count(self) -> int:
        """Number of echoed requests so far."""
        with self._lock:
            return self._count

    def __call__(self, environ: Environ, start_response: StartResponse) -> list[bytes]:
        if _path(environ) == "/count":
            with self._lock:
                body = f"Count {self._count}\n"
            return _respond(start_response, body)
        with self._lock:
            self._count += 1
        return echo_app(environ, start_response)


def request_echo_app(environ: Environ, start_response: StartResponse) -> list[bytes]:
    """Echo the request line, headers, host, remote address and parameters."""
    method = environ.get("REQUEST_METHOD", "GET")
    proto = environ.get("SERVER_PROTOCOL", "HTTP/1.1")
    lines = [f"{method} {_request_uri(environ)} {proto}"]
    for name, values in _headers(environ).items():
        lines.append(f"Header[{_quote(name)}] = {_quote_list(values)}")
    lines.append(f"Host = {_quote(environ.get('HTTP_HOST', ''))}")
    lines.append(f"RemoteAddr = {_quote(_remote_addr(environ))}")
    try:
        form = _form(environ)
    except ParamError as err:
        errors = environ.get("wsgi.errors", sys.stderr)
        print(err, file=errors)
        form = {}
    for name, values in form.items():
        lines.append(f"Form[{_quote(name)}] = {_quote_list(values)}")
    return _respond(start_response, "".join(line + "\n" for line in lines))


@dataclass
class _SearchParams:
    labels: list[str] = field(default_factory=list, metadata={"http": "l"})
    max_results: int = field(default=10, metadata={"http": "max"})
    exact: bool = field(default=False, metadata={"http": "x"})

    def __str__(self) -> str:
        exact = "true" if self.exact else "false"
        labels = " ".join(self.labels)
        return f"{{Labels:[{labels}] MaxResults:{self.max_results} Exact:{exact}}}"


def search_app(environ: Environ, start_response: StartResponse) -> list[bytes]:
    """Serve ``/search``, reporting the parsed search parameters."""
    if _path(environ) != "/search":
        return _not_found(start_response)
    data = _SearchParams()
    try:
        unpack(_form(environ), data)
    except ParamError as err:
        return _respond(start_response, f"{err}\n", "400 Bad Request")
    return _respond(start_response, f"Search: {data}\n")


def lissajous_app(environ: Environ, start_response: StartResponse) -> list[bytes]:
    """Serve a freshly drawn animated Lissajous GIF."""
    buf = io.BytesIO()
    lissajous(buf)
    return _respond(start_response, buf.getvalue(), content_type="image/gif")


_APPS: dict[str, Callable[[], Callable[..., Any]]] = {
    "echo": lambda: echo_app,
    "count": CountingApp,
    "request": lambda: request_echo_app,
    "search": lambda: search_app,
    "lissajous": lambda: lissajous_app,
}


def _split_address(addr: str) -> tuple[str, int]:
    host, sep, port = addr.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid address {addr!r}")
    return host, int(port)


def main(argv: list[str] | None = None) -> int:
    """Serve one of the applications until interrupted."""
    parser = argparse.ArgumentParser(prog="servers", description="Run a small web server.")
    parser.add_argument("app", nargs="?", choices=sorted(_APPS), default="echo")
    parser.add_argument("--addr", default=None, help="host:port to listen on")
    options = parser.parse_args(argv)

    addr = options.addr
    if addr is None:
        addr = ":12345" if options.app == "search" else "localhost:8000"
    try:
        host, port = _split_address(addr)
    except ValueError as err:
        parser.error(str(err))

    app = _APPS[options.app]()
    try:
        with make_server(host, port, app) as server:
            server.serve_forever()
    except KeyboardInterrupt:
        return 0
    except OSError as err:
        print(f"servers: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())