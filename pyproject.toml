[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mysterymanor"
version = "0.1.0"
description = "A murder-mystery puzzle game with riddles, a quiz, a passcode and arcade mini-games"
requires-python = ">=3.10"
keywords = ["game", "puzzle", "mystery", "riddle", "quiz", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mysterymanor = "mysterymanor.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mysterymanor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
