[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillrunner"
version = "0.1.0"
description = "Run, verify and watch a set of small programming exercises listed in info.toml"
requires-python = ">=3.11"
keywords = ["exercises", "learning", "drills", "teaching", "command-line"]
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
]
dependencies = [
    "rich",
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
drillrunner = "drillrunner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["drillrunner"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
