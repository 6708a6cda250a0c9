[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mshell"
version = "0.1.0"
description = "Parsing core of a small shell: token lists to command trees, wildcard expansion, here-documents and string helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "parser", "wildcard", "heredoc", "command-line"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
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

[tool.hatch.build.targets.wheel]
packages = ["mshell"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
