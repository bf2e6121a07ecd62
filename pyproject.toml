[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minishparse"
version = "0.1.0"
description = "Shell command-line parsing: quoting, variable expansion, pipes and redirections, plus small string helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "parser", "quoting", "tokenizer", "pipes", "redirection"]
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

[project.scripts]
minishparse = "minishparse.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["minishparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
