[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boxcount"
version = "0.1.0"
description = "Box counting of non-white pixels in square grey-level images, with a fractal-dimension estimate and simple file-based message pipes"
requires-python = ">=3.10"
dependencies = []
keywords = ["box-counting", "fractal", "fractal dimension", "image", "pipe"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
boxcount = "boxcount.cli:main"
boxcount-pipe-server = "boxcount.pipedemo:server_main"
boxcount-pipe-client = "boxcount.pipedemo:client_main"

[tool.hatch.build.targets.wheel]
packages = ["boxcount"]

[tool.pytest.ini_options]
addopts = "-ra"
