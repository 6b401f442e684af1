# setup.py
from setuptools import setup, find_packages

setup(
    name="theta",
    version="0.1.0",
    description="A small tree-walking interpreter for a parenthesized expression language",
    packages=find_packages(include=["theta", "theta.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["theta = theta.__main__:main"],
    },
    zip_safe=False,
)
