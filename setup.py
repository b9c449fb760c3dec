# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

from setuptools import find_packages, setup

setup(
    name="typegen",
    version="0.1.0",
    description="Type descriptors and type expressions for generated model code",
    author="Wahyu Ardiansyah",
    license="Apache-2.0",
    packages=find_packages(include=["typegen", "typegen.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.21",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
        ],
    },
    entry_points={
        "console_scripts": ["typegen = typegen.cli:main"],
    },
)
