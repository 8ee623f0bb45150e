[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mongobase"
version = "1.0.0"
description = "Base document model for MongoDB collections with insert, update and soft-delete metadata"
requires-python = ">=3.10"
keywords = ["mongodb", "pymongo", "model", "soft-delete", "timestamps", "objectid"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pymongo>=4.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
mongobase-demo = "mongobase.demo:main"
mongobase-mongodb-demo = "mongobase.repository:main"

[tool.hatch.build.targets.wheel]
packages = ["mongobase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
