[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modaledit"
version = "0.1.0"
description = "A small modal, vi-like terminal text editor with UTF-8 aware editing"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["editor", "vi", "modal", "terminal", "curses", "text", "utf-8"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
modaledit = "modaledit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["modaledit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
