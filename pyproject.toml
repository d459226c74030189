[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "twtrapi"
version = "0.1.0"
description = "A bearer-token client for the Twitter v2 API: batch compliance jobs and direct message lookup."
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["twitter", "api", "client", "v2", "direct-messages", "compliance"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["twtrapi"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
