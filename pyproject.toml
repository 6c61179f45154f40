[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tareas"
version = "0.1.0"
description = "Interactive console task list with personal, academic and work tasks stored in a plain text file"
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "todo", "console", "menu", "scheduling"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tareas = "tareas.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tareas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
