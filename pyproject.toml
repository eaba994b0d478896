[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sbsh"
version = "0.1.0"
description = "A small command shell with batch mode, parallel commands, output redirection and a search path"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "batch", "redirection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sbsh = "sbsh.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sbsh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
