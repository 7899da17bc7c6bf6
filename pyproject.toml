[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shoehorn-tools"
version = "0.1.0"
description = "Helpers for Shoehorn platform tooling: token resolution, server URL checks, manifest diffing, conversion paths, forge inputs, CI checks and addon bundles"
requires-python = ">=3.10"
dependencies = []
keywords = ["shoehorn", "catalog", "manifest", "forge", "addon"]
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
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["shoehorn_tools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
