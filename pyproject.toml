[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "designlab"
version = "0.1.0"
description = "Classic design patterns and small low-level system designs: ATM, parking lot, elevator, tic-tac-toe and movie booking."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "low-level-design",
    "observer",
    "factory",
    "abstract-factory",
    "adapter",
    "composite",
    "chain-of-responsibility",
    "logger",
    "atm",
    "parking-lot",
    "elevator",
    "tic-tac-toe",
    "movie-booking",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
designlab-logger = "designlab.patterns.logger:main"
designlab-adapter = "designlab.patterns.adapter:main"
designlab-abstract-factory = "designlab.patterns.abstract_factory:main"
designlab-factory = "designlab.patterns.factory_method:main"
designlab-observer = "designlab.patterns.observer:main"
designlab-chain = "designlab.patterns.chain:main"
designlab-composite = "designlab.patterns.composite:main"
designlab-elevator = "designlab.elevator.elevator:main"
designlab-atm = "designlab.atm.atm:main"
designlab-parking = "designlab.parking.parking_app:main"
designlab-tictactoe = "designlab.tictactoe.game:main"
designlab-bookmyshow = "designlab.bookmyshow.booking:main"

[tool.hatch.build.targets.wheel]
packages = ["designlab"]

[tool.hatch.build.targets.sdist]
include = ["designlab", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
