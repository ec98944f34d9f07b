[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contactbook"
version = "0.1.0"
description = "A small interactive address book stored in a local SQLite database."
requires-python = ">=3.10"
dependencies = []
keywords = ["contacts", "address book", "sqlite", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Email :: Address Book",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
contactbook = "contactbook.application:main"

[tool.hatch.build.targets.wheel]
packages = ["contactbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
