[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vocabcount"
version = "1.0.0"
description = "Count how many vocabulary strings each line of a text file contains, with progress bars."
requires-python = ">=3.10"
dependencies = []
keywords = ["vocabulary", "trie", "substring", "text", "threads", "progress"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
countvocabstrings = "vocabcount.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vocabcount"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
