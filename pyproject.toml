[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cim-ipld"
version = "0.3.0"
description = "Verified content types and magic-byte detection for common document, image, audio and video formats"
requires-python = ">=3.10"
keywords = ["content-types", "file-formats", "magic-bytes", "format-detection", "verification"]
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
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cim_ipld"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
