# setup.py
from setuptools import setup, find_packages

setup(
    name="typedcalc",
    version="0.1.0",
    description="Embeddable stack-based expression runtime with closures and promises",
    packages=find_packages(include=["typedcalc", "typedcalc.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
