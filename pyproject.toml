[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "camsim"
version = "0.1.0"
description = "Simulated cameras that stream binary status and discovery messages to a TCP collector server"
requires-python = ">=3.10"
dependencies = []
keywords = ["camera", "simulator", "tcp", "telemetry", "binary-protocol"]
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
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
camsim-client = "camsim.simulator:main"
camsim-server = "camsim.server:main"

[tool.hatch.build.targets.wheel]
packages = ["camsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
