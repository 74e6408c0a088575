import io
import sys
from collections import Counter

from kitbag.charcount import CharCounts, count_chars, format_counts, main


def _byte_total(result: CharCounts) -> int:
    return sum(i * n for i, n in enumerate(result.utflen)) + result.invalid


def test_valid_text_matches_decoded_counter():
    text = "héllo, 世界 😀 ok"
    data = text.encode("utf-8")
    result = count_chars(data)
    assert result.counts == Counter(text)
    assert result.invalid == 0
    assert _byte_total(result) == len(data)


def test_histogram_matches_number_of_characters():
    text = "aé€😀aé"
    result = count_chars(text.encode("utf-8"))
    assert sum(result.utflen) == sum(result.counts.values()) == len(text)
    for ch, n in result.counts.items():
        assert n == text.count(ch)


def test_invalid_bytes_counted_one_by_one():
    data = b"a\xff\xfeb\xe4\xb8"
    result = count_chars(data)
    assert result.counts == Counter("ab")
    assert _byte_total(result) == len(data)
    assert result.invalid == len(data) - 2


def test_replacement_character_in_input_is_valid():
    data = "\ufffd".encode("utf-8")
    result = count_chars(data)
    assert result.invalid == 0
    assert result.counts["\ufffd"] == 1


def test_surrogate_encoding_is_invalid():
    data = b"\xed\xa0\x80"
    result = count_chars(data)
    assert result.invalid == len(data)
    assert not result.counts


def test_format_counts_layout():
    report = format_counts(count_chars(b"a\n"))
    assert report.startswith("rune\tcount\n")
    assert "'a'\t1\n" in report
    assert "'\\n'\t1\n" in report
    assert "\nlen\tcount\n1\t2\n" in report
    assert "invalid" not in report


def test_format_counts_reports_invalid():
    report = format_counts(count_chars(b"\xff"))
    assert report.endswith("\n1 invalid UTF-8 characters\n")


def test_main_reads_stdin(monkeypatch, capsys):
    stream = io.TextIOWrapper(io.BytesIO("xx".encode("utf-8")))
    monkeypatch.setattr(sys, "stdin", stream)
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == format_counts(count_chars(b"xx"))
    assert "'x'\t2\n" in out