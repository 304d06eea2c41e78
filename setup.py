# setup.py
from setuptools import setup, find_packages

setup(
    name="sail",
    version="0.1.0",
    description="Evaluator core for the Sail Lisp dialect",
    packages=find_packages(include=["sail", "sail.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
