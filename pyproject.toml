[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "schedulo"
version = "0.1.0"
description = "A small coursework task tracker that keeps assignments and deadlines in a CSV file"
requires-python = ">=3.10"
dependencies = []
keywords = ["tasks", "deadlines", "assignments", "csv", "scheduling", "todo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
schedulo = "schedulo.cli:main"

[tool.setuptools]
packages = ["schedulo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
