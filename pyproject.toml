[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "canmaster"
version = "0.1.0"
description = "CANopen master building blocks: object dictionary store, NMT command frames and a frame-sending driver"
requires-python = ">=3.10"
dependencies = []
keywords = ["can", "canopen", "nmt", "object-dictionary", "fieldbus"]
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
    "Topic :: Software Development :: Embedded Systems :: Controller Area Network (CAN) :: CANopen",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["canmaster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
