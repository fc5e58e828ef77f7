[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lineards"
version = "0.1.0"
description = "Bounded stacks and queues, with bracket balancing and infix-to-postfix/prefix conversion"
requires-python = ">=3.10"
dependencies = []
keywords = ["stack", "queue", "circular-queue", "postfix", "prefix", "infix", "data-structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lineards = "lineards.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lineards"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
