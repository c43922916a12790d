[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gentest"
version = "1.0.0"
description = "Building blocks for a unit test runtime: test metadata, naming rules, runner options, test contexts, benchmark timing and JUnit/Allure reports"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "testing",
    "unit-testing",
    "fixtures",
    "benchmark",
    "junit",
    "allure",
    "wildcard",
]
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
    "Topic :: Software Development :: Testing :: Unit",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gentest"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
