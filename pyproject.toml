[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "firebbs"
version = "0.1.0"
description = "Library pieces of a Firebird-style bulletin board system: MD5 digests, C-style printf formatting, string lists, read marks and advertisement files"
requires-python = ">=3.10"
dependencies = []
keywords = ["bbs", "bulletin-board", "firebird", "md5", "printf", "snprintf", "boardrc"]
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
    "Topic :: Communications :: BBS",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["firebbs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
