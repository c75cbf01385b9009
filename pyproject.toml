[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "transitkit"
version = "0.1.0"
description = "Readers and writers for delimited text and XML, with OpenStreetMap and CSV bus-system models built on them."
requires-python = ">=3.10"
dependencies = []
keywords = ["dsv", "csv", "xml", "openstreetmap", "osm", "bus", "transit", "string utilities"]
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
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Text Processing :: Markup :: XML",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["transitkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
