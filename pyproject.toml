[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nxbench"
version = "0.1.0"
description = "CoreMark-style workload kernels and the Dhrystone benchmark in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "coremark", "dhrystone", "crc", "cpu"]
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
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nxbench-dhrystone = "nxbench.dhrystone:main"

[tool.hatch.build.targets.wheel]
packages = ["nxbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
