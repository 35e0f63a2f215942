[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "transpatch"
version = "0.1.0"
description = "Control networks and evaluators for multi-sided surface patches: generalized Bezier, S-patch and Super-D."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "geometry",
    "cagd",
    "surface",
    "bezier",
    "transfinite",
    "s-patch",
    "multi-sided patch",
    "nelder-mead",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["transpatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
