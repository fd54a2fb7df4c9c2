[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "serialist-objects"
version = "0.1.0"
description = "MIDI chord segmentation, numeric list generators and an editable multi-voice list with undo"
requires-python = ">=3.10"
dependencies = []
keywords = ["midi", "chord", "segmentation", "algorithmic composition", "multilist"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["serialist_objects"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
