"""Setup script for fileio."""

from setuptools import setup, find_packages

with open("requirements.txt") as f:
    requirements = f.read().splitlines()
    # Filter out comments and empty lines
    requirements = [
        line.strip() for line in requirements
        if line.strip() and not line.startswith("#")
    ]

setup(
    name="fileio",
    version="0.1.0",
    description="File system helpers for reading, writing, copying and pruning files",
    author="fileio Team",
    packages=find_packages(include=["fileio", "fileio.*"]),
    install_requires=requirements,
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
