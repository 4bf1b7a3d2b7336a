[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tasklane"
version = "0.1.0"
description = "A small to-do service with users and tasks, a JSON API, an interactive console, and string and number helpers"
requires-python = ">=3.10"
keywords = ["todo", "tasks", "scheduling", "rest", "sqlalchemy", "flask", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "sqlalchemy>=2.0",
    "flask>=2.2",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
tasklane-tutorial = "tasklane.tutorial:main"

[tool.hatch.build.targets.wheel]
packages = ["tasklane"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
