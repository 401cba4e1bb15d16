# setup.py
from setuptools import setup, find_packages

setup(
    name="symtab",
    version="0.1.0",
    description="Symbol interning table with read-only and write-only views",
    packages=find_packages(include=["symtab", "symtab.*"]),
    python_requires=">=3.9",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
