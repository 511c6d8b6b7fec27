# setup.py
from setuptools import setup, find_packages

setup(
    name="shape-schema",              # the *distribution* name on PyPI
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),   # will find shape_schema/
    python_requires=">=3.9",
    install_requires=["pandas"],      # date construction in DateSchema
    extras_require={
        "test": ["pytest"],
    },
    description="Declarative runtime validation + JSON-Schema export for request data",
    author="Your Name",
    license="Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International License",
)
