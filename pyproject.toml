[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "probetable"
version = "0.1.0"
description = "Open-addressing hash table with linear and double-hash probing, a radix-36 string hash, a Mersenne Twister and a straight-line Boggle solver"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash table", "open addressing", "double hashing", "string hash", "boggle", "mersenne twister"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
probetable-strhash = "probetable.strhash:main"
probetable-boggle = "probetable.boggle:main"
probetable-htdemo = "probetable.htdemo:main"

[tool.hatch.build.targets.wheel]
packages = ["probetable"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
