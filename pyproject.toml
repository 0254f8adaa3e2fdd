[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vectorsoft"
version = "1.0.0"
description = "Flight software building blocks: vector and quaternion math, Adam optimisation, thrust-vector-control allocation, actuator and sensor models, and CSV data logging."
requires-python = ">=3.10"
keywords = ["gnc", "thrust vector control", "quaternion", "adam", "rocketry", "flight software"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vectorsoft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
