# setup.py
from setuptools import setup, find_packages

setup(
    name="l1",
    version="0.1.0",
    description="Tree-walking evaluator for the L1 expression language",
    packages=find_packages(include=["l1", "l1.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={"test": ["pytest"]},
    zip_safe=False,
)
