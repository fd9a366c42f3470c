[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estl"
version = "0.1.0"
description = "Fixed-capacity containers and sequence algorithms for code that needs bounded memory use"
requires-python = ">=3.10"
dependencies = []
keywords = ["containers", "fixed-capacity", "vector", "sorted-map", "algorithms", "embedded"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
estl-demo = "estl.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["estl"]

[tool.pytest.ini_options]
addopts = "-ra"
