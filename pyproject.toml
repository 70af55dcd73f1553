[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "multidigest"
version = "0.1.0"
description = "Pure-Python CRC-32, MD4, HMAC-MD4, MD5, eDonkey, SHA-1 and SHA-256 digests, with progress reporting and command-line option helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "hash",
    "digest",
    "checksum",
    "crc32",
    "md4",
    "md5",
    "ed2k",
    "sha1",
    "sha256",
    "hmac",
]
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
    "Topic :: System :: Archiving",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["multidigest"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
