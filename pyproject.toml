[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modvec"
version = "0.1.0"
description = "Element-wise modular arithmetic on vectors of unsigned 64-bit integers, with Barrett reduction and 128-bit word helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "modular arithmetic",
    "barrett reduction",
    "number theory",
    "128-bit arithmetic",
    "lattice cryptography",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["modvec"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
