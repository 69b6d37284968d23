[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pocketr"
version = "0.1.0"
description = "A small LR35902 (Game Boy) CPU core: registers, flags, memory bus and instruction dispatch"
requires-python = ">=3.10"
dependencies = []
keywords = ["gameboy", "emulator", "lr35902", "cpu", "sm83"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pocketr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
