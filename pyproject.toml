[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sumtree_ticks"
version = "0.1.0"
description = "Tick-to-price math and 256-bit fixed-point decimal arithmetic for a limit order book"
requires-python = ">=3.10"
dependencies = []
keywords = ["orderbook", "tick", "price", "decimal", "fixed-point", "exchange"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["sumtree_ticks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
