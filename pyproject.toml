[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "readassembly"
version = "0.1.0"
description = "Reference-guided DNA read assembly with FM-index and brute-force read mapping"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bioinformatics",
    "dna",
    "fm-index",
    "burrows-wheeler",
    "suffix-array",
    "read-mapping",
    "sequence-assembly",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
readassembly = "readassembly.cli:main"
readassembly-reference = "readassembly.simulate:reference_main"
readassembly-reads = "readassembly.simulate:reads_main"

[tool.hatch.build.targets.wheel]
packages = ["readassembly"]

[tool.hatch.build.targets.sdist]
include = ["readassembly", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
