[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pulumi-profiles"
version = "0.1.0"
description = "Interactive selector for Pulumi backend profiles"
requires-python = ">=3.10"
keywords = ["pulumi", "profiles", "backend", "cli", "shell"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "prompt-toolkit>=3.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
pulumi-profile-selector = "pulumi_profiles.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pulumi_profiles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
