[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "morphtables"
version = "0.1.0"
description = "Builders and inspectors for the binary tables of a dictionary-based Russian and English morphological analyser"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "morphology",
    "russian",
    "dictionary",
    "inflection",
    "interchange",
    "linguistics",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Natural Language :: Russian",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
morphtables-lexmap = "morphtables.lexmap:main"
morphtables-makeich = "morphtables.ichcompiler:main"

[tool.hatch.build.targets.wheel]
packages = ["morphtables"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
