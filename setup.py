#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="tarsift",
    version="1.0.0",
    description="Selective streaming extraction from huge gzip-compressed tarballs",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    extras_require={
        'test': [
            'pytest>=7',
        ],
    },
    entry_points={
        'console_scripts': [
            'tarsift=tarsift.cli:main',
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: System Administrators",
        "Topic :: System :: Archiving",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
