from __future__ import annotations

from setuptools import find_packages, setup


setup(
    name="getenvas",
    version="0.1.0",
    description="Typed environment variable lookups with defaults",
    packages=find_packages(exclude=("tests", "tests.*")),
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "dev": [
            "flake8>=7.0.0",
            "pylint>=3.0.0",
            "ruff>=0.14.0",
        ],
        "test": [
            "pytest>=7.0.0",
        ],
    },
)
