[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptolab"
version = "0.1.0"
description = "Classic cryptographic primitives and attacks on their misuse: encodings, SHA-1 MACs, MT19937, RSA, DSA and Diffie-Hellman."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "sha1",
    "hmac",
    "length-extension",
    "rsa",
    "dsa",
    "diffie-hellman",
    "mersenne-twister",
    "cryptanalysis",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cryptolab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
