[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "freedtrack"
version = "0.1.0"
description = "Thread-safe frame rings, queue nodes and small frame-pipeline utilities"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "ring buffer",
    "bounded queue",
    "frame pipeline",
    "producer consumer",
    "texture formats",
]
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["freedtrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
