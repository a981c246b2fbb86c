[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ojsolutions"
version = "0.1.0"
description = "Solutions to classic online-judge problems, usable as functions or as judge-style commands"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "online judge",
    "competitive programming",
    "algorithms",
    "fenwick tree",
    "exercises",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
oj-distinct = "ojsolutions.distinct:main"
oj-codejam = "ojsolutions.codejam:main"
oj-hdoj = "ojsolutions.hdoj:main"
oj-poj = "ojsolutions.poj:main"
oj-seuoj = "ojsolutions.seuoj:main"
oj-hihocoder = "ojsolutions.hihocoder:main"

[tool.hatch.build.targets.wheel]
packages = ["ojsolutions"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
