[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hcsbench"
version = "0.1.0"
description = "Interactive benchmark of sequential and threaded array summation, with run statistics and on-disk records of computing systems and test results"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "parallel", "threads", "speedup", "statistics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
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
hcsbench = "hcsbench.app:main"

[tool.hatch.build.targets.wheel]
packages = ["hcsbench"]

[tool.pytest.ini_options]
addopts = "-ra"
