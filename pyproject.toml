[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bestfit-heap"
version = "0.1.0"
description = "A best-fit heap allocator simulated over a fixed array of machine words"
requires-python = ">=3.10"
dependencies = []
keywords = ["allocator", "malloc", "free", "best-fit", "heap", "memory"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bestfit-heap-stress = "bestfit_heap.stress:main"

[tool.hatch.build.targets.wheel]
packages = ["bestfit_heap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
