[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chatwith"
version = "0.1.0"
description = "Chat with your local ollama models from the terminal"
requires-python = ">=3.10"
dependencies = [
    "platformdirs",
]
keywords = ["ollama", "chat", "llm", "terminal", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chatwith = "chatwith.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chatwith"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
