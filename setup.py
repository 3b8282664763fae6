# setup.py
from setuptools import setup, find_packages

setup(
    name="objtri",
    version="1.0.0",
    description="Wavefront OBJ parser producing flat triangle meshes",
    packages=find_packages(include=["objtri", "objtri.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "objtri=objtri.__main__:main",
        ],
    },
)
