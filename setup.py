
from setuptools import setup, find_packages
setup(
    name="salted_bloom",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["numpy", "xxhash"],
    extras_require={"test": ["pytest", "hypothesis"]},
    python_requires=">=3.10",
)
