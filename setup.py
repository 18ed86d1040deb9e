#!/usr/bin/env python3

from setuptools import setup

setup(
    name="phrasebox",
    version="0.1.0",
    description="Memorable passphrase generator",
    packages=["phrasebox"],
    package_data={"phrasebox": ["words.txt"]},
    python_requires=">=3.7",
    install_requires=["blessed", "pyperclip"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["phrasebox = phrasebox.main:main"]},
)
