[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "louvaingraph"
version = "0.1.0"
description = "Building blocks for Louvain-style community detection on CSR graphs: degrees, best moves, vertex following, edge similarity and clustering comparison"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "clustering", "community detection", "louvain", "modularity", "csr"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["louvaingraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
