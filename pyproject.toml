[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minish"
version = "0.1.0"
description = "Command-line handling for a small shell: syntax checking, quoting, variable expansion, tokenizing, redirections, command lookup and builtins"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "parser", "tokenizer", "builtins"]
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

[tool.hatch.build.targets.wheel]
packages = ["minish"]

[tool.pytest.ini_options]
addopts = "-ra"
