from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="floorpaths",
    version="0.1.0",
    description="Minimum-weight path enumeration over implicit-location edge lists.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*", "examples")),
    package_data={"floorpaths": ["schemas/*.json"]},
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=["PyYAML", "jsonschema", "networkx"],
    extras_require={"test": ["pytest"]},
    tests_require=["pytest"],
    entry_points={"console_scripts": ["floorpaths=floorpaths.cli:main"]},
)
