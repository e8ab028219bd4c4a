[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hanconv"
version = "1.1.3"
description = "Chinese phrase dictionaries with prefix matching, a binary lexicon format and statistical phrase extraction"
requires-python = ">=3.10"
dependencies = []
keywords = ["chinese", "dictionary", "lexicon", "prefix-matching", "phrase-extraction", "entropy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Natural Language :: Chinese (Traditional)",
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

[tool.hatch.build.targets.wheel]
packages = ["hanconv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
