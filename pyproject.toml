[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stkit"
version = "0.9.3"
description = "Terminal emulator helpers: box-drawing glyph rasterisation, URL detection, OSC 7 parsing, opacity steps and new-terminal spawning"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "terminal",
    "box-drawing",
    "braille",
    "sextants",
    "octants",
    "osc7",
    "url-detection",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals :: Terminal Emulators/X Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stkit"]

[tool.pytest.ini_options]
addopts = "-ra"
