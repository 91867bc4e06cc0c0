[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pong"
version = "1.0.0"
description = "A resizable Pong game with computer opponents, multiple balls and obstacles."
requires-python = ">=3.10"
keywords = ["pong", "game", "arcade", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pong = "pong.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pong"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
