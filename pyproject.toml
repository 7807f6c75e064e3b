[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "archr"
version = "0.2.0"
description = "Archive extractor that unpacks each archive into a new directory beside it"
requires-python = ">=3.10"
keywords = ["cli", "extract", "unarchive", "unzip", "tar", "gzip", "bzip2", "xz", "shift_jis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Utilities",
]
dependencies = [
    "tqdm",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
archr = "archr.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["archr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
