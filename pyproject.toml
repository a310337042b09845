[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fieldkit"
version = "0.1.0"
description = "Small embedded-firmware helpers: NTP date conversion, strict string handling, packed versions, time spinboxes and AT response parsing"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "embedded",
    "firmware",
    "ntp",
    "rtc",
    "at-commands",
    "modem",
    "gnss",
    "spinbox",
]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fieldkit-puzzle = "fieldkit.puzzle:main"
fieldkit-sara = "fieldkit.sara:main"

[tool.hatch.build.targets.wheel]
packages = ["fieldkit"]

[tool.hatch.build.targets.sdist]
include = ["fieldkit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
