[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "varisat"
version = "0.2.1"
description = "Data structures of a CDCL SAT solver: proof step encoding, clause storage, configuration and the VSIDS heuristic"
requires-python = ">=3.10"
dependencies = []
keywords = ["sat", "cdcl", "vsids", "proof", "clause", "varint"]
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
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["varisat"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
