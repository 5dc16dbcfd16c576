[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filtervars"
version = "0.1.0"
description = "Named, cacheable variables resolved from request context, data and the clock for rule filters"
requires-python = ">=3.10"
dependencies = []
keywords = ["filter", "rules", "variables", "context", "registry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "freezegun"]

[tool.hatch.build.targets.wheel]
packages = ["filtervars"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
