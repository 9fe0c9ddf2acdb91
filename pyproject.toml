[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arenabattler"
version = "1.0.0"
description = "A turn-based auto-battler for the terminal: build a hero, fight five arena battles, loot weapons and level up."
requires-python = ">=3.11"
dependencies = []
keywords = ["game", "auto-battler", "turn-based", "rpg", "arena", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
arenabattler = "arenabattler.game_manager:main"

[tool.hatch.build.targets.wheel]
packages = ["arenabattler"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
