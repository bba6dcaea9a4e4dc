[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mixradix"
version = "0.1.0"
description = "Mixed-radix Cooley-Tukey discrete Fourier transforms for real-valued samples"
requires-python = ">=3.10"
dependencies = []
keywords = ["fft", "dft", "fourier", "cooley-tukey", "mixed-radix", "signal-processing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
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
test = ["pytest"]

[project.scripts]
mixradix = "mixradix.cli:main"
mixradix-radix2 = "mixradix.radix2:main"
mixradix-radix5 = "mixradix.radix5:main"
mixradix-waves = "mixradix.waves:main"

[tool.hatch.build.targets.wheel]
packages = ["mixradix"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
