[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "icukit"
version = "0.5.4"
description = "Canister bookkeeping utilities: cycles, principals, in-memory registries, a canister pool, a cycle tracker and delegation sessions"
requires-python = ">=3.10"
keywords = ["canister", "cycles", "registry", "delegation", "principal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]
dependencies = ["cbor2"]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["icukit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
