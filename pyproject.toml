[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exerciser"
version = "4.6.0"
description = "Run, check and track progress through a directory of small programming exercises"
requires-python = ">=3.11"
dependencies = [
    "watchdog",
]
keywords = ["exercises", "learning", "education", "tutorial", "rustc", "progress"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
    "Topic :: Education",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
exerciser = "exerciser.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["exerciser"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
