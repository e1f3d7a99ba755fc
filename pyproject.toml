[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "satmodels"
version = "0.1.0"
description = "Simple physical models of satellite subsystems: rigid body dynamics, MEMS sensors, Hall-effect propulsion and force bookkeeping."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "satellite",
    "simulation",
    "rigid body",
    "quaternion",
    "gyroscope",
    "accelerometer",
    "hall thruster",
    "physics",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["satmodels"]

[tool.pytest.ini_options]
addopts = "-ra"
