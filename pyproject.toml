[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "udp-discovery"
version = "0.1.0"
description = "Interactive command-line tool for discovering peers on a local network with UDP broadcasts"
requires-python = ">=3.10"
keywords = ["udp", "broadcast", "discovery", "lan", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]
dependencies = [
    "termcolor",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
udp-discovery = "udp_discovery.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["udp_discovery"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
