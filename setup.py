#!/usr/bin/env python3
from pathlib import Path

import setuptools
from setuptools import setup

this_dir = Path(__file__).parent
module_dir = this_dir / "sc3tools"

# -----------------------------------------------------------------------------

# Load README in as long description
long_description: str = ""
readme_path = this_dir / "README.md"
if readme_path.is_file():
    long_description = readme_path.read_text(encoding="utf-8")

requirements = []
requirements_path = this_dir / "requirements.txt"
if requirements_path.is_file():
    with open(requirements_path, "r", encoding="utf-8") as requirements_file:
        requirements = requirements_file.read().splitlines()

version_path = module_dir / "VERSION"
with open(version_path, "r", encoding="utf-8") as version_file:
    version = version_file.read().strip()

data_files = [module_dir / "VERSION", module_dir / "py.typed", module_dir / "games.json"]
data_files.extend(sorted((module_dir / "resources").glob("*/*")))

# -----------------------------------------------------------------------------

setup(
    name="sc3tools",
    version=version,
    description="Character tables for the text encoding of MAGES. visual novels",
    long_description=long_description,
    license="MIT",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    package_data={"sc3tools": [str(p.relative_to(module_dir)) for p in data_files]},
    install_requires=requirements,
    extras_require={
        ':python_version<"3.9"': ["importlib_resources"],
        "test": ["pytest", "pytest-cov"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Text Processing :: General",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    keywords="steins;gate sc3 mages charset",
)
