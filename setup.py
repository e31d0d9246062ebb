"""
Uploadable setup.py — Package configuration.
"""

from setuptools import find_packages, setup

setup(
    name="uploadable",
    version="1.0.0",
    description="Uploadable — upload configuration for record models",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.5",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
        ],
    },
)
