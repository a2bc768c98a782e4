[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "notepaper"
version = "0.1.0"
description = "Generate printable ruled, dotted, cursive and blackletter practice pages as PDF files"
requires-python = ">=3.10"
dependencies = []
keywords = ["pdf", "notebook", "paper", "calligraphy", "handwriting", "dot grid"]
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
    "Topic :: Printing",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
notepaper = "notepaper.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["notepaper"]

[tool.pytest.ini_options]
addopts = "-ra"
