#!/usr/bin/env python3
# setup.py: install the dev-utils command-line toolbox
#
# Install:
#   pip install -e .          (add [test] for pytest)
#
# Run:
#   dev-utils --help
#   python main.py --help

from setuptools import setup, find_packages

# Use README.md as the long description when present
try:
    with open("README.md", "r", encoding="utf-8") as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = "Git, GitHub and Terraform workflow shortcuts"

setup(
    name="dev-utils",
    version="1.0.0",
    description="Git, GitHub and Terraform workflow shortcuts, including GitHub organization clone/update",
    long_description=long_description,
    long_description_content_type="text/markdown",
    py_modules=["main"],
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "colorama>=0.4.6",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "dev-utils=dev_utils.cli.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Version Control :: Git",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
