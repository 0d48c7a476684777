[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matbench"
version = "0.1.0"
description = "Matrix-vector multiplication benchmark for int, float and double element types"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "matrix", "vector", "multiplication"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
matbench = "matbench.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["matbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
