"""Setup script for part_namer package."""

from setuptools import setup, find_packages

setup(
    name="part_namer",
    version="1.0.0",
    description="Deterministic part naming and classification for catalog hardware",
    author="Continental Machines Inc.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov",
        ],
    },
)
