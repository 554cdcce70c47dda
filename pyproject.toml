[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpalgo"
version = "0.1.0"
description = "Competitive-programming algorithms and judge checkers: number theory, DP, graphs, strings, geometry and output comparison."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "competitive-programming",
    "graphs",
    "dynamic-programming",
    "sieve",
    "checker",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpalgo-polygon-area = "cpalgo.geometry:main"
cpalgo-fish = "cpalgo.fish:main"

[tool.hatch.build.targets.wheel]
packages = ["cpalgo"]

[tool.pytest.ini_options]
addopts = "-ra"
