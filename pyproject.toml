[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deskx"
version = "2.0.2"
description = "Remote desktop control over TCP with a compact run-length screen codec"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["remote desktop", "screen sharing", "codec", "run-length", "tcp"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
deskx = "deskx.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["deskx"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
