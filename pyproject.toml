[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fdlines"
version = "0.1.0"
description = "Read lines one at a time from file descriptors, keeping leftover bytes per descriptor between calls"
requires-python = ">=3.10"
dependencies = []
keywords = ["lines", "file descriptor", "reader", "buffered", "os.read"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fdlines"]

[tool.pytest.ini_options]
addopts = "-ra"
