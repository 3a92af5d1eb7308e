[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cherrylink"
version = "0.17.0"
description = "Multi-Game Boy helpers: CB opcodes, screen compositing, core options, geometry and link accessories"
requires-python = ">=3.10"
dependencies = []
keywords = ["gameboy", "emulator", "link-cable", "multiplayer", "splitscreen"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cherrylink"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
