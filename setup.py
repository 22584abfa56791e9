# setup.py
from setuptools import setup, find_packages

setup(
    name="scratchdir",
    version="0.1.0",
    description="Self-deleting, collision-resistant temporary directories",
    author="Swift Fox",
    packages=find_packages(
        exclude=(
            "tests",
            "tests.*",
            "docs",
            "dist",
            "build",
        )
    ),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
