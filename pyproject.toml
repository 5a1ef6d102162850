[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cbormap"
version = "0.11.0"
description = "CBOR map items with definite and indefinite storage semantics"
requires-python = ">=3.10"
dependencies = []
keywords = ["cbor", "map", "rfc8949", "definite", "indefinite"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cbormap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
