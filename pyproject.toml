[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rectbox"
version = "0.1.0"
description = "Button-to-controller input mapping for rectangle-style controllers: SOCD resolution, game modes and Melee stick limits."
requires-python = ">=3.10"
dependencies = []
keywords = ["controller", "socd", "melee", "input-mapping", "gamecube", "rectangle-controller"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rectbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
