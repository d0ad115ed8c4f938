[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "samlib"
version = "1.3.0"
description = "Building blocks for a shell alias manager: file-backed stores with expiry, a command output cache, shell command helpers, tmux control and a terminal picker."
requires-python = ">=3.10"
dependencies = []
keywords = ["aliases", "shell", "cache", "tmux", "terminal", "picker"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
samlib-picker = "samlib.modal_view:main"

[tool.hatch.build.targets.wheel]
packages = ["samlib"]

[tool.pytest.ini_options]
addopts = "-ra"
