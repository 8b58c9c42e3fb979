[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knightsquest"
version = "0.1.0"
description = "Game rules, room data and level file tools for a multicolour-bitmap dungeon crawler"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "dungeon", "role-playing", "bitmap", "sprites", "hexdump"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
knightsquest-hexdump = "knightsquest.hexdump:main"

[tool.hatch.build.targets.wheel]
packages = ["knightsquest"]

[tool.pytest.ini_options]
addopts = "-ra"
