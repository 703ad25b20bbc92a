[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polyglot_content"
version = "0.1.0"
description = "Known languages and translatable content values with fallback chains."
requires-python = ">=3.10"
dependencies = []
keywords = ["i18n", "translation", "languages", "localization", "content"]
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
    "Topic :: Software Development :: Internationalization",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["polyglot_content"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
