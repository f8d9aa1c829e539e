[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ticketeria"
version = "0.1.0"
description = "Console ticket office for concerts, plays, sports matches and festivals: events, seating, clients, purchases and promotions."
requires-python = ">=3.10"
dependencies = []
keywords = ["tickets", "events", "box office", "seating", "console", "purchases"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
ticketeria = "ticketeria.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ticketeria"]

[tool.hatch.build.targets.sdist]
include = ["ticketeria", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
