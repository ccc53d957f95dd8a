[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "encuestas"
version = "0.1.0"
description = "Console browser for surveys, their questions and their weighted answers"
requires-python = ">=3.10"
dependencies = []
keywords = ["survey", "encuesta", "questionnaire", "console", "menu"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
encuestas = "encuestas.app:main"

[tool.hatch.build.targets.wheel]
packages = ["encuestas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
