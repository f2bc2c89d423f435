# setup.py
from setuptools import setup, find_packages

setup(
    name="clicksign",
    version="0.1.0",
    description="Client for the Clicksign electronic-signature API",
    packages=find_packages(where=".", exclude=["tests"]),
    python_requires=">=3.8",
    install_requires=[
        "requests",
        "pydantic>=2",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
