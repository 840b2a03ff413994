[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "materialquant"
version = "0.1.0"
description = "Color utilities and image color quantization (Wu, weighted k-means, Celebi) with theme value types."
requires-python = ">=3.10"
dependencies = []
keywords = ["color", "quantization", "palette", "lab", "theme", "k-means"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["materialquant"]

[tool.pytest.ini_options]
addopts = "-ra"
