[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "twowho"
version = "0.1.0"
description = "A minimal TCP server that accepts a connection, prints the request and answers with a greeting"
requires-python = ">=3.10"
dependencies = []
keywords = ["server", "tcp", "socket"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
twowho = "twowho.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["twowho"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
