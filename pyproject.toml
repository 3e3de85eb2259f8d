[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sodiumbox"
version = "0.2.2"
description = "Authenticated symmetric encryption with libsodium secret boxes, using base64 text in and out"
requires-python = ">=3.10"
dependencies = [
    "pynacl",
]
keywords = ["sodium", "libsodium", "secretbox", "xsalsa20", "poly1305", "encryption", "base64"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sodiumbox"]

[tool.pytest.ini_options]
addopts = "-ra"
