"""Print tables and reports of GitHub issues matching search terms."""

from __future__ import annotations

import argparse
import sys
import urllib.parse
from datetime import datetime, timedelta, timezone

from kitbag.github import Issue, IssuesSearchResult, SearchError, search_issues

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&#34;",
    "'": "&#39;",
    "+": "&#43;",
    "\0": "\ufffd",
}
_URL_SAFE = "!#$&*+,/:;=?@[]-._~%"
_SAFE_SCHEMES = {"http", "https", "mailto"}
_UNSAFE_URL = "#ZgotmplZ"


def days_ago(t: datetime, now: datetime | None = None) -> int:
    """Whole days from ``t`` to ``now`` (the current time by default)."""
    now = datetime.now(timezone.utc) if now is None else now
    return int((now - t) / timedelta(hours=1) / 24)


def _items(result: IssuesSearchResult) -> list[Issue]:
    items = []
    for item in result.items:
        if item is None:
            raise ValueError("nil issue in search result")
        items.append(item)
    return items


def _login(item: Issue) -> str:
    if item.user is None:
        raise ValueError(f"issue #{item.number} has no user")
    return item.user.login


def text_table(result: IssuesSearchResult) -> str:
    """One line per issue: number, user and title, truncated to fit."""
    lines = [f"{result.total_count} issues:\n"]
    for item in _items(result):
        login = _login(item)[:9]
        lines.append(f"#{item.number:<5d} {login:>9} {item.title[:55]}\n")
    return "".join(lines)


def _escape_html(s: str) -> str:
    return "".join(_HTML_ESCAPES.get(ch, ch) for ch in s)


def _escape_url(url: str) -> str:
    colon = url.find(":")
    if colon >= 0 and "/" not in url[:colon]:
        if url[:colon].lower() not in _SAFE_SCHEMES:
            return _UNSAFE_URL
    return _escape_html(urllib.parse.quote(url, safe=_URL_SAFE))


def html_table(result: IssuesSearchResult) -> str:
    """An HTML table of the issues, with all values escaped."""
    parts = [
        f"\n<h1>{result.total_count} issues</h1>\n"
        "<table>\n"
        "<tr style='text-align: left'>\n"
        "  <th>#</th>\n"
        "  <th>State</th>\n"
        "  <th>User</th>\n"
        "  <th>Title</th>\n"
        "</tr>\n"
    ]
    for item in _items(result):
        if item.user is None:
            raise ValueError(f"issue #{item.number} has no user")
        url = _escape_url(item.html_url)
        parts.append(
            "\n<tr>\n"
            f"  <td><a href='{url}'>{item.number}</a></td>\n"
            f"  <td>{_escape_html(item.state)}</td>\n"
            f"  <td><a href='{_escape_url(item.user.html_url)}'>"
            f"{_escape_html(item.user.login)}</a></td>\n"
            f"  <td><a href='{url}'>{_escape_html(item.title)}</a></td>\n"
            "</tr>\n"
        )
    parts.append("\n</table>\n")
    return "".join(parts)


def text_report(result: IssuesSearchResult, now: datetime | None = None) -> str:
    """A multi-line report of each issue with its age in days."""
    parts = [f"{result.total_count} issues:\n"]
    for item in _items(result):
        parts.append(
            "----------------------------------------\n"
            f"Number: {item.number}\n"
            f"User:   {_login(item)}\n"
            f"Title:  {item.title[:64]}\n"
            f"Age:    {days_ago(item.created_at, now)} days\n"
        )
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Search for issues and print them as a table, an HTML table or a report."""
    parser = argparse.ArgumentParser(prog="issues", description="Search GitHub issues.")
    style = parser.add_mutually_exclusive_group()
    style.add_argument("--html", action="store_true", help="print an HTML table")
    style.add_argument("--report", action="store_true", help="print a detailed report")
    parser.add_argument("terms", nargs="*")
    options = parser.parse_args(argv)

    try:
        result = search_issues(options.terms)
        if options.html:
            output = html_table(result)
        elif options.report:
            output = text_report(result)
        else:
            output = text_table(result)
    except (SearchError, OSError, ValueError) as err:
        print(f"issues: {err}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())