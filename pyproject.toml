[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linearstructs"
version = "0.1.0"
description = "Classic linear data structures (stack, queue, deque, ordered set, linked list) with small programs built on them"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "stack",
    "queue",
    "deque",
    "set",
    "linked-list",
    "insertion-sort",
    "infix",
    "postfix",
    "data-structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linearstructs-infix = "linearstructs.infix:main"
linearstructs-stock = "linearstructs.stock:main"
linearstructs-now-serving = "linearstructs.now_serving:main"
linearstructs-go-fish = "linearstructs.go_fish:main"

[tool.hatch.build.targets.wheel]
packages = ["linearstructs"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
