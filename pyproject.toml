[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reconparse"
version = "0.1.0"
description = "Filter and normalise the text output of common reconnaissance tools into clean lists of URLs, hosts and ports."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "recon",
    "parser",
    "httpx",
    "ffuf",
    "dirsearch",
    "amass",
    "nmap",
    "wafw00f",
    "mantra",
    "dns",
    "cli",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Information Technology",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Security",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
reconparse = "reconparse.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["reconparse"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
