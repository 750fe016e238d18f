from pathlib import Path

from setuptools import setup, find_packages

# Read the version without importing the package and its dependencies
version_ns: dict = {}
exec((Path(__file__).parent / "fibtree" / "version.py").read_text(), version_ns)

setup(
    name="fibtree",
    version=version_ns["__version__"],
    packages=find_packages(include=["fibtree", "fibtree.*"]),
    install_requires=[
        "dask>=2023.1.0",
        "typer>=0.9.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "fibtree=fibtree.main:app",
        ],
    },
    python_requires=">=3.9",
)
