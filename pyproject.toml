[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schedchat"
version = "0.1.0"
description = "CPU scheduling simulations (FCFS, SJF, priority, round robin) and a small TCP broadcast chat server and client"
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "fcfs", "sjf", "round-robin", "chat", "sockets", "operating-systems"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
schedchat-schedule = "schedchat.scheduler:main"
schedchat-server = "schedchat.server:main"
schedchat-client = "schedchat.client:main"

[tool.hatch.build.targets.wheel]
packages = ["schedchat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
