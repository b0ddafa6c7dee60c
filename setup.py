# setup.py
from setuptools import setup, find_packages

setup(
    name="lispoo",
    version="0.1.0",
    description="A minimal S-expression language interpreter",
    packages=find_packages(include=["lispoo", "lispoo.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lispoo=lispoo.cli:main"],
    },
    zip_safe=False,
)
