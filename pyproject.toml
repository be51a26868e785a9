[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coastalwaves"
version = "0.1.0"
description = "Linear wave theory, a one-layer non-hydrostatic dispersion solver and a 1D wave channel simulator for coastal engineering"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "coastal engineering",
    "water waves",
    "dispersion relation",
    "wave generation",
    "wave channel",
    "linear wave theory",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Hydrology",
    "Topic :: Scientific/Engineering :: Oceanography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coastalwaves = "coastalwaves.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["coastalwaves"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
