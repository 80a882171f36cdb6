[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcukit"
version = "0.1.0"
description = "Microcontroller helpers: CAN filter masks, soft SPI, a simulated ILI9341 display, timers and small demos"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "embedded",
    "microcontroller",
    "can",
    "spi",
    "ili9341",
    "display",
    "bit-banging",
    "chaos-game",
    "ws2812",
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
can-mask = "mcukit.canmask:main"
mcukit-fractal = "mcukit.fractal:main"

[tool.hatch.build.targets.wheel]
packages = ["mcukit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
