[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "etisnoop"
version = "2.2.0"
description = "Building blocks for analysing DAB ETI streams: CRCs, FIG headers, lookup tables, watermark decoding and FIG repetition rates"
requires-python = ">=3.10"
dependencies = []
keywords = ["dab", "eti", "fig", "fic", "radio", "broadcast", "crc", "analysis"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["etisnoop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
