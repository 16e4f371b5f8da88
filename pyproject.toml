[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilewm"
version = "6.5.0"
description = "Tiling window manager core: layouts, gaps, floating placement, state persistence and an IPC client"
requires-python = ">=3.10"
dependencies = []
keywords = ["window-manager", "tiling", "layouts", "ipc", "x11"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tilewm-msg = "tilewm.msg:main"

[tool.hatch.build.targets.wheel]
packages = ["tilewm"]

[tool.pytest.ini_options]
addopts = "-ra"
