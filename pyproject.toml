[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aurac"
version = "0.1.0"
description = "Toolchain core for AURA media annotation documents: lexer, diagnostics, configuration readers, history store and .atlas writer."
requires-python = ">=3.11"
dependencies = [
    "tomli-w",
]
keywords = [
    "aura",
    "compiler",
    "lexer",
    "media",
    "annotation",
    "history",
    "alignment",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Multimedia",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["aurac"]

[tool.hatch.build.targets.sdist]
include = [
    "aurac",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
