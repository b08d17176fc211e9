[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "sudokulens"
version = "0.1.0"
description = "Read a photographed sudoku grid, recognise its digits with a small neural network and solve it"
requires-python = ">=3.10"
keywords = [
    "sudoku",
    "ocr",
    "image-processing",
    "neural-network",
    "homography",
    "solver",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Recognition",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sudokulens = "sudokulens.cli:main"
sudokulens-solve = "sudokulens.solver:main"

[tool.setuptools.packages.find]
include = ["sudokulens*"]

[tool.pytest.ini_options]
addopts = "-ra"
