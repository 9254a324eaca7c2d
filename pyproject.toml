[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seqstrings"
version = "0.1.0"
description = "String algorithms for DNA sequences: tries, suffix arrays, suffix trees, Burrows-Wheeler transform and Knuth-Morris-Pratt matching."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bioinformatics",
    "dna",
    "trie",
    "suffix-array",
    "suffix-tree",
    "burrows-wheeler",
    "kmp",
    "pattern-matching",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
    "Topic :: Text Processing :: General",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
seqstrings = "seqstrings.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["seqstrings"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
