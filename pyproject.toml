[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small, runnable examples of the classic object-oriented design patterns."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design patterns",
    "adapter",
    "bridge",
    "proxy",
    "builder",
    "factory method",
    "flyweight",
    "mediator",
    "memento",
    "prototype",
    "singleton",
    "facade",
    "iterator",
    "observer",
    "state",
    "decorator",
    "strategy",
    "template method",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternkit = "patternkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.hatch.build.targets.sdist]
include = ["patternkit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
