# SPDX-FileCopyrightText: 2025 ShamirsSecret contributors
# SPDX-License-Identifier: MIT

from setuptools import find_packages, setup

setup(
    name="shamirssecret",
    version="0.1.0",
    description="Shamir's (t, n)-threshold secret sharing with key sharding tools",
    author="ShamirsSecret contributors",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click<9.0,>=8.1",
        "cryptography>=42.0",
    ],
    extras_require={
        # dev / тестирование
        "test": [
            "pytest>=8.0.0",
            "pytest-timeout>=2.3.0",
            "hypothesis>=6.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "shamirssecret=shamirssecret.cli:main",
        ],
    },
)
