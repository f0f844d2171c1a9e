[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fakeprinter"
version = "0.1.0"
description = "A simulated 3D printer that replays print layers from a CSV file and exports each layer to disk"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d-printing", "simulation", "csv", "layers", "export"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Printing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fakeprinter = "fakeprinter.printer:main"

[tool.hatch.build.targets.wheel]
packages = ["fakeprinter"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
