[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stomplite"
version = "0.1.0"
description = "STOMP frames, headers, frame reader and writer, heart-beat parsing and client helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["stomp", "messaging", "protocol", "frames", "message-queue"]
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
    "Topic :: Communications",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stomplite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
