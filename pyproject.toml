[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinytarget"
version = "0.1.0"
description = "Software model of a small side-channel training target: SimpleSerial framing, AES-128, TEA, XOR, a password check and a glitch loop"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "simpleserial",
    "side-channel",
    "fault-injection",
    "aes",
    "tea",
    "xor",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinytarget = "tinytarget.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tinytarget"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
