"""Fetch URLs and print their content, sizes and timings."""

from __future__ import annotations

import argparse
import http.client
import shutil
import sys
import time
import urllib.request
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import BinaryIO
from urllib.error import HTTPError, URLError

_CHUNK = 32 * 1024
_READ_ERRORS = (OSError, http.client.HTTPException)


def normalize_url(url: str) -> str:
    """Prefix ``url`` with ``http://`` unless it already starts with it."""
    if not url.startswith("http://"):
        return "http://" + url
    return url


def _open(url: str):
    """Open ``url``; error statuses are returned as responses, not raised."""
    try:
        return urllib.request.urlopen(url)
    except HTTPError as err:
        return err
    except ValueError as err:
        raise URLError(str(err)) from err


def _status(resp) -> str:
    return f"{resp.getcode()} {resp.reason}"


def fetch(url: str, out: BinaryIO) -> str:
    """Copy the body found at ``url`` to ``out`` and return the HTTP status.

    Raises :class:`OSError` if the request fails or the body cannot be read.
    """
    resp = _open(url)
    with resp:
        try:
            shutil.copyfileobj(resp, out, _CHUNK)
        except _READ_ERRORS as err:
            raise OSError(f"reading {url}: {err}") from err
        return _status(resp)


def _drain(resp) -> int:
    total = 0
    while chunk := resp.read(_CHUNK):
        total += len(chunk)
    return total


def _fetch_timed(url: str) -> str:
    start = time.perf_counter()
    try:
        resp = _open(url)
    except OSError as err:
        return str(err)
    with resp:
        try:
            nbytes = _drain(resp)
        except _READ_ERRORS as err:
            return f"while reading {url}: {err}"
    secs = time.perf_counter() - start
    return f"{secs:.2f}s  {nbytes:7d}  {url}"


def fetch_all(urls: Iterable[str]) -> Iterator[str]:
    """Fetch all ``urls`` in parallel, yielding one report line per URL.

    Lines come in the order the fetches finish. A successful fetch reports
    its time, size in bytes and URL; a failed one reports the error.
    """
    targets = list(urls)
    if not targets:
        return
    with ThreadPoolExecutor(max_workers=len(targets)) as pool:
        futures = [pool.submit(_fetch_timed, url) for url in targets]
        for future in as_completed(futures):
            yield future.result()


def main(argv: list[str] | None = None) -> int:
    """Print the content found at each URL, or time them all in parallel."""
    parser = argparse.ArgumentParser(prog="fetch", description="Fetch URLs.")
    parser.add_argument(
        "--prefix", action="store_true", help="add http:// to URLs that lack it"
    )
    parser.add_argument(
        "--status", action="store_true", help="print the HTTP status after each body"
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="fetch in parallel and report times and sizes",
    )
    parser.add_argument("urls", nargs="*")
    options = parser.parse_args(argv)

    urls = [normalize_url(u) if options.prefix else u for u in options.urls]

    if options.all:
        start = time.perf_counter()
        for line in fetch_all(urls):
            print(line)
        print(f"{time.perf_counter() - start:.2f}s elapsed")
        return 0

    sys.stdout.flush()
    out = sys.stdout.buffer
    for url in urls:
        try:
            status = fetch(url, out)
        except OSError as err:
            out.flush()
            print(f"fetch: {err}", file=sys.stderr)
            return 1
        if options.status:
            out.write(f"\n{status}\n".encode("utf-8"))
    out.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())