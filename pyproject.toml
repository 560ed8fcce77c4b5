[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scenemulti"
version = "0.4.1"
description = "Multistream destination settings: JSON storage, output-setting resolution and per-provider token files"
requires-python = ">=3.10"
dependencies = []
keywords = ["streaming", "rtmp", "multistream", "encoder", "configuration"]
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
    "Topic :: Multimedia :: Video",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["scenemulti"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
