[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "judgeproblems"
version = "0.1.0"
description = "Solutions to classic online-judge exercises, plus a coin-toss correlation simulation"
requires-python = ">=3.10"
dependencies = []
keywords = ["online judge", "exercises", "programming problems", "education", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
judgeproblems = "judgeproblems.cli:main"
judgeproblems-coin = "judgeproblems.coin:main"

[tool.hatch.build.targets.wheel]
packages = ["judgeproblems"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
