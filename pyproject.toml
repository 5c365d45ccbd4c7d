[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "softhal"
version = "1.0.0"
description = "Software-emulated wide-integer arithmetic and vector/matrix kernels for 64/128/256-bit values"
requires-python = ">=3.10"
dependencies = []
keywords = ["int128", "int256", "wide integer", "matrix multiplication", "dot product", "two's complement"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["softhal"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
