[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trexrunner"
version = "0.1.0"
description = "An endless side-scrolling runner game with a jumping, ducking dinosaur"
requires-python = ">=3.10"
keywords = ["game", "runner", "arcade", "dinosaur", "pygame", "2d", "spritesheet"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
trexrunner = "trexrunner.app:main"

[tool.hatch.build.targets.wheel]
packages = ["trexrunner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
