[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modcount"
version = "0.1.0"
description = "Exact counting and probability computations modulo primes, with NTT-based polynomial arithmetic"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "combinatorics",
    "modular arithmetic",
    "number theoretic transform",
    "polynomials",
    "formal power series",
    "counting",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
modcount-ioi2020-10 = "modcount.ioi2020_10:main"
modcount-ioi2020-14 = "modcount.ioi2020_14:main"
modcount-ioi2020-18 = "modcount.ioi2020_18:main"
modcount-ioi2020-21 = "modcount.ioi2020_21:main"
modcount-ioi2020-25 = "modcount.ioi2020_25:main"
modcount-ioi2020-27 = "modcount.ioi2020_27:main"
modcount-ioi2020-34 = "modcount.ioi2020_34:main"
modcount-ioi2020-54 = "modcount.ioi2020_54:main"
modcount-ioi2021-05 = "modcount.ioi2021_05:main"
modcount-ioi2021-06 = "modcount.ioi2021_06:main"
modcount-ioi2021-11 = "modcount.ioi2021_11:main"

[tool.hatch.build.targets.wheel]
packages = ["modcount"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
