# setup.py
from setuptools import setup, find_packages

setup(
    name="objmesh",
    version="0.1.0",
    description="Wavefront OBJ to triangle-list mesh importer",
    packages=find_packages(include=["objmesh", "objmesh.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
