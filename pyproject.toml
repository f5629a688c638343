[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "apsmock"
version = "0.2.0"
description = "Mock responses and in-memory state for Autodesk Platform Services APIs, driven by OpenAPI specifications"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["autodesk", "aps", "mock", "testing", "api", "openapi"]
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
    "Topic :: Software Development :: Testing :: Mocking",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["apsmock"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
