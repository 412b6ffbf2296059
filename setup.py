# setup.py
from setuptools import setup, find_packages

setup(
    name="pairlisp",
    version="0.1.0",
    description="A minimal S-expression interpreter with cons pairs, closures and 32-bit integers",
    packages=find_packages(include=["pairlisp", "pairlisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["pairlisp=pairlisp.interpreter:main"],
    },
    zip_safe=False,
)
