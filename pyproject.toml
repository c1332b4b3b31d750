[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "addchain"
version = "0.4.0"
description = "Addition chain types, programs and integer helpers for cryptographic exponentiation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "addition chain",
    "exponentiation",
    "modular inversion",
    "cryptography",
    "finite field",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
addchain = "addchain.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["addchain"]

[tool.hatch.build.targets.sdist]
include = ["addchain", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
