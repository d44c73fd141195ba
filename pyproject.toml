[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linksocket"
version = "0.1.0"
description = "Unreliable, unordered UDP packet sockets for clients and servers, with a link conditioner that simulates latency, jitter and loss"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "networking",
    "udp",
    "socket",
    "packets",
    "gamedev",
    "link-conditioner",
    "latency",
    "jitter",
    "packet-loss",
]
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
    "Topic :: System :: Networking",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Framework :: AsyncIO",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
linksocket-demo-server = "linksocket.demo_server:main"
linksocket-demo-client = "linksocket.demo_client:main"

[tool.hatch.build.targets.wheel]
packages = ["linksocket"]

[tool.hatch.build.targets.sdist]
include = [
    "linksocket",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
