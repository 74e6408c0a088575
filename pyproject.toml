[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kitbag"
version = "0.1.0"
description = "A kit of small text, number, image, compression and web utilities with matching command-line tools."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "echo",
    "palindrome",
    "deep-equality",
    "bzip2",
    "mandelbrot",
    "lissajous",
    "temperature",
    "popcount",
    "wsgi",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kitbag-echo = "kitbag.echo:main"
kitbag-dup = "kitbag.dup:main"
kitbag-charcount = "kitbag.charcount:main"
kitbag-cf = "kitbag.tempconv:main"
kitbag-surface = "kitbag.surface:main"
kitbag-images = "kitbag.images:main"
kitbag-bzipper = "kitbag.bzip:main"
kitbag-fetch = "kitbag.fetch:main"
kitbag-serve = "kitbag.servers:main"
kitbag-issues = "kitbag.issues:main"

[tool.hatch.build.targets.wheel]
packages = ["kitbag"]

[tool.hatch.build.targets.sdist]
include = [
    "kitbag",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
