#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

setup(
    name="PyVoreeal",
    version="0.1.0",
    description="Integer axis-aligned regions for voxel volumes",
    author="PyVoreeal Team",
    packages=find_packages(include=["pyvoreeal", "pyvoreeal.*"]),
    include_package_data=True,
    python_requires=">=3.7",
    install_requires=[
        "numpy>=1.19.0",
        "coloredlogs",
        "ipython",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "pyvoreeal=pyvoreeal.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Scientific/Engineering",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
    ],
)
