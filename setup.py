# setup.py
from setuptools import setup, find_packages

setup(
    name="pack-schema",               # the *distribution* name on PyPI
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),  # will find pack_schema/
    install_requires=["pandas"],      # DataFrame reports + the "dataframe" type predicate
    python_requires=">=3.9",
    description="Predicate packs: structural validation and explanations for nested mappings",
    author="Your Name",
    license="Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International License",
)
