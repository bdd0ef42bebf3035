from setuptools import setup, find_packages

setup(
    name="banana_grid",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*", "banana_grid.tests"]),
    package_data={"banana_grid": ["configs/*.yaml"]},
    install_requires=[
        "numpy",
        "PyYAML",
        "matplotlib",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
