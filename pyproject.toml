[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "opscinema"
version = "0.1.0"
description = "Typed contracts, canonical JSON, export manifests and guarded shell verifiers for evidence-backed tutorial and proof bundles."
requires-python = ">=3.10"
keywords = [
    "tutorial",
    "evidence",
    "export-manifest",
    "canonical-json",
    "ipc",
    "verifier",
    "runbook",
    "blake3",
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
    "Topic :: Software Development :: Documentation",
    "Typing :: Typed",
]
dependencies = [
    "pydantic>=2",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[tool.hatch.build.targets.wheel]
packages = ["opscinema"]

[tool.hatch.build.targets.sdist]
include = ["opscinema", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
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
