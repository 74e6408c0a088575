# kitbag

A bag of small, self-contained utilities: text and number helpers, a
palindrome checker, temperature types, a cycle-tolerant deep equality
test, value inspection helpers, a bzip2 stream writer, fractal and
Lissajous image generators, small WSGI apps, and a client for a hosted
issue tracker's search API. Most of the modules also come with a
command-line tool.

Requires Python 3.10 or later. Images are made with Pillow.

## Library use

```python
from kitbag.word import is_palindrome
from kitbag.textutil import basename, comma
from kitbag.tempconv import Celsius, c_to_f
from kitbag.popcount import pop_count
from kitbag.equal import equal

is_palindrome("A man, a plan, a canal: Panama")   # True
basename("a/b.c.go")                              # "b.c"
comma("1234567")                                  # "1,234,567"
str(c_to_f(Celsius(100)))                         # "212°F"
pop_count(255)                                    # 8
equal([1, 2, 3], [1, 2, 3])                       # True
```

Modules:

- `kitbag.echo` – `echo(newline, sep, args, out)` joins arguments and writes them; `echo_with_indices(args)` yields each argument with its position.
- `kitbag.word` – `is_palindrome(s)` ignores case and non-letters; `is_palindrome_bytes(s)` compares raw UTF-8 bytes.
- `kitbag.textutil` – `basename`, `comma`, `ints_to_string`, `nonempty`, `reverse`, `reverse_lines`.
- `kitbag.dup` – `count_lines`, `duplicates`, `split_file_lines`, `dedup` and `LineInfo` for finding repeated lines.
- `kitbag.charcount` – `count_chars(data)` returns a `CharCounts`; `format_counts` renders it.
- `kitbag.tempconv` – `Celsius` and `Fahrenheit` float types, `c_to_f` and `f_to_c`.
- `kitbag.popcount` – `pop_count(x)` counts the set bits of a 64-bit unsigned integer.
- `kitbag.treesort` – `tree_sort(values)` sorts a list in place with a binary tree.
- `kitbag.graph` – `Graph` with `add_edge` and `has_edge`.
- `kitbag.surface` – `f`, `corner` and `render_svg()`, which draws a 3-D surface as SVG.
- `kitbag.images` – `mandelbrot`, `newton`, `acos`, `sqrt`, `render_fractal`, `lissajous`, `to_jpeg`.
- `kitbag.format` – `format_any(value)` formats a value without looking inside it.
- `kitbag.display` – `display(name, x, out)` prints the structure of a value, one leaf per line.
- `kitbag.methods` – `print_methods(x, out)` prints the public methods of a value's type with their signatures.
- `kitbag.equal` – `equal(x, y)` deep equality; values of different types are never equal.
- `kitbag.params` – `unpack(form, target)` fills a dataclass instance from a query string or mapping, raising `ParamError` on bad values.
- `kitbag.bzip` – `BzipWriter`, a bzip2-compressing writer with `write` and `close`, usable as a context manager.
- `kitbag.fetch` – `normalize_url`, `fetch(url, out)` and `fetch_all(urls)`.
- `kitbag.servers` – WSGI apps: `echo_app`, `CountingApp`, `request_echo_app`, `search_app`, `lissajous_app`.
- `kitbag.github` – `search_issues(terms)`, `parse_search_result`, and the `User`, `Issue`, `IssuesSearchResult` dataclasses; `SearchError` for failed queries.
- `kitbag.issues` – `days_ago`, `text_table`, `html_table`, `text_report`.
- `kitbag.movie` – `Movie`, `movies_to_json` and `titles_from_json`.

## Command-line tools

| Command            | What it does                                                                 |
|--------------------|------------------------------------------------------------------------------|
| `kitbag-echo`      | prints its arguments (`-n` omits the newline, `-s` sets the separator, `--indices` numbers them) |
| `kitbag-dup`       | prints lines that occur more than once in files or stdin (`--names`, `--whole`, `--unique`) |
| `kitbag-charcount` | counts Unicode characters read from stdin                                    |
| `kitbag-cf`        | shows each number as both Celsius and Fahrenheit (`--boiling`, `--ftoc`)     |
| `kitbag-surface`   | writes an SVG surface plot to stdout                                         |
| `kitbag-images`    | `mandelbrot [--function NAME] [--size N]` writes PNG, `lissajous` writes GIF, `jpeg` converts stdin to JPEG |
| `kitbag-bzipper`   | bzip2-compresses stdin to stdout                                             |
| `kitbag-fetch`     | fetches URLs and prints their bodies (`--prefix`, `--status`, `--all`)       |
| `kitbag-serve`     | serves `echo`, `count`, `request`, `search` or `lissajous` (`--addr host:port`) |
| `kitbag-issues`    | searches the issue tracker and prints a table (`--html`, `--report`)         |

Examples:

```sh
kitbag-echo -s , a b c
kitbag-dup notes.txt todo.txt
kitbag-cf 32 100
kitbag-surface > surface.svg
kitbag-images mandelbrot --size 512 > fractal.png
kitbag-bzipper < data.txt > data.txt.bz2
kitbag-serve count --addr localhost:8000
```

## Limitations

- There is no S-expression encoder or decoder.
- `kitbag-serve` uses the standard library's development server; it is meant for trying the apps out, not for production.
- `kitbag-fetch` and `kitbag-issues` need network access.

## Tests

The test suite uses pytest and lives in `tests/`.