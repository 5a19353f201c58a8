# setup.py
from setuptools import setup, find_packages

setup(
    name="rlisp",
    version="0.1.0",
    description="A minimal s-expression interpreter with lexical closures",
    packages=find_packages(include=["rlisp", "rlisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["rlisp=rlisp.repl:main"],
    },
    zip_safe=False,
)
