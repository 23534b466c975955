[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "abrupng"
version = "0.1.0"
description = "Extract image brushes from Adobe ABR files as PNGs."
requires-python = ">=3.10"
dependencies = []
keywords = ["abr", "brush", "png", "photoshop", "image", "converter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
abrupng = "abrupng.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["abrupng"]

[tool.pytest.ini_options]
addopts = "-ra"
