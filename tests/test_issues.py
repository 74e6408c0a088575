import io
import json
from datetime import datetime, timedelta, timezone
from unittest.mock import patch
from urllib.error import URLError

import pytest

from kitbag.github import Issue, IssuesSearchResult, User
from kitbag.issues import days_ago, html_table, main, text_report, text_table

CREATED = datetime(2020, 1, 1, tzinfo=timezone.utc)


def _issue(number, login, title, url="https://example.com/i/1"):
    return Issue(
        number=number,
        html_url=url,
        title=title,
        state="open",
        user=User(login, "https://example.com/u/" + login),
        created_at=CREATED,
    )


RESULT = IssuesSearchResult(
    total_count=13,
    items=[
        _issue(5680, "eaigner", "encoding/json: set key converter on en/decoder"),
        _issue(6050, "gopherbot", "encoding/json: provide tokenizer"),
        _issue(
            9650,
            "cespare",
            "encoding/json: Decoding gives errPhase when unmarshaling types",
        ),
    ],
)


def test_days_ago_truncates():
    now = CREATED + timedelta(days=3, hours=23)
    assert days_ago(CREATED, now) == 3
    assert days_ago(CREATED, CREATED - timedelta(hours=12)) == 0
    assert days_ago(CREATED, CREATED + timedelta(days=750)) == 750


def test_text_table_matches_documented_output():
    lines = text_table(RESULT).splitlines()
    assert lines[0] == "13 issues:"
    assert lines[1] == "#5680    eaigner encoding/json: set key converter on en/decoder"
    assert lines[2] == "#6050  gopherbot encoding/json: provide tokenizer"
    assert lines[3] == "#9650    cespare encoding/json: Decoding gives errPhase when unmarshalin"


def test_text_table_truncates_long_login():
    result = IssuesSearchResult(1, [_issue(1, "a" * 20, "t")])
    line = text_table(result).splitlines()[1]
    assert line.split()[1] == "a" * 9


def test_text_report_entries():
    now = CREATED + timedelta(days=750)
    report = text_report(RESULT, now)
    assert report.startswith("13 issues:\n----------------------------------------\n")
    assert (
        "Number: 5680\nUser:   eaigner\n"
        "Title:  encoding/json: set key converter on en/decoder\n"
        "Age:    750 days\n"
    ) in report
    assert report.count("----------------------------------------\n") == 3


def test_text_report_truncates_title():
    result = IssuesSearchResult(1, [_issue(1, "joe", "x" * 100)])
    report = text_report(result, CREATED)
    assert "Title:  " + "x" * 64 + "\n" in report


def test_html_table_rows():
    out = html_table(IssuesSearchResult(1, [_issue(1, "joe", "Hello")]))
    assert out.startswith("\n<h1>1 issues</h1>\n<table>\n")
    assert out.endswith("</tr>\n\n</table>\n")
    assert "  <td><a href='https://example.com/i/1'>1</a></td>\n" in out
    assert "  <td><a href='https://example.com/u/joe'>joe</a></td>\n" in out
    assert "  <td><a href='https://example.com/i/1'>Hello</a></td>\n" in out


def test_html_table_escapes_text():
    out = html_table(IssuesSearchResult(1, [_issue(1, "joe", "<script>x</script>")]))
    assert "<script>" not in out
    assert "&lt;script&gt;x&lt;/script&gt;" in out


def test_html_table_filters_unsafe_urls():
    issue = _issue(1, "joe", "t", url="javascript:alert(1)")
    out = html_table(IssuesSearchResult(1, [issue]))
    assert "javascript" not in out
    assert "href='#ZgotmplZ'" in out


def test_missing_user_raises():
    issue = Issue(number=3, title="t")
    with pytest.raises(ValueError):
        text_table(IssuesSearchResult(1, [issue]))
    with pytest.raises(ValueError):
        html_table(IssuesSearchResult(1, [issue]))


def test_main_prints_table(capsys):
    payload = {
        "total_count": 1,
        "items": [{"number": 6050, "title": "encoding/json: provide tokenizer",
                   "user": {"login": "gopherbot"}}],
    }
    resp = io.BytesIO(json.dumps(payload).encode())
    resp.status, resp.reason = 200, "OK"
    with patch("urllib.request.urlopen", return_value=resp):
        assert main(["json"]) == 0
    out = capsys.readouterr().out
    assert out == "1 issues:\n#6050  gopherbot encoding/json: provide tokenizer\n"


def test_main_reports_failure(capsys):
    with patch("urllib.request.urlopen", side_effect=URLError("no route")):
        assert main(["json"]) == 1
    assert "issues:" in capsys.readouterr().err