[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "morphdic"
version = "0.1.0"
description = "Reader for binary morphological-analysis dictionaries and normalized input text buffers for Japanese tokenization"
requires-python = ">=3.11"
dependencies = []
keywords = [
    "japanese",
    "morphological-analysis",
    "tokenizer",
    "dictionary",
    "trie",
    "nlp",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["morphdic"]

[tool.hatch.build.targets.sdist]
include = ["morphdic", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
