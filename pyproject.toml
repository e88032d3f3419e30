[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskbox"
version = "0.1.0"
description = "Small text, number and process utilities: bracket checking, palindromes, table sums and /proc inspection"
requires-python = ">=3.10"
dependencies = []
keywords = ["brackets", "palindrome", "procfs", "processes", "text", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
taskbox-geometry = "taskbox.geometry:main"
taskbox-brackets = "taskbox.brackets:main"
taskbox-palindrome = "taskbox.palindrome:main"
taskbox-numfile = "taskbox.numfile:main"
taskbox-textstats = "taskbox.textstats:main"
taskbox-tablesums = "taskbox.tablesums:main"
taskbox-procfs = "taskbox.procfs:main"
taskbox-process = "taskbox.process:main"

[tool.hatch.build.targets.wheel]
packages = ["taskbox"]

[tool.pytest.ini_options]
addopts = "-ra"
