[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termedit"
version = "1.0.0"
description = "Building blocks for a small terminal text editor: key decoding, a text buffer and screen rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "terminal", "text", "keymap", "escape-sequences"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["termedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
