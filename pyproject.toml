[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tvhkit"
version = "0.1.0"
description = "ADTS/AAC frame parser for extracting embedded RDS data, plus predictive channel tuning helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["aac", "adts", "rds", "bitstream", "huffman", "tuning"]
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
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tvhkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
