[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termcat"
version = "0.0.1"
description = "Building blocks for a terminal chat client that talks to local OpenAI-compatible LLM servers."
requires-python = ">=3.10"
dependencies = []
keywords = ["llm", "openai", "chat", "sse", "streaming", "tool-calling", "line-editing"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["termcat"]

[tool.pytest.ini_options]
addopts = "-ra"
