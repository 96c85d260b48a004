[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "packetnet"
version = "0.1.0"
description = "Small TCP and UDP client/server framework exchanging header;data packets"
requires-python = ">=3.10"
keywords = ["networking", "tcp", "udp", "client", "server", "packet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
packetnet-client = "packetnet.menu_client:main"

[tool.hatch.build.targets.wheel]
packages = ["packetnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
