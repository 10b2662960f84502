from setuptools import setup, find_packages


setup(
    name="featio",
    version="0.1.0",
    description="Reading and writing of GFF feature records as a stream",
    license="BSD-3-Clause",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "numpy >= 1.25",
    ],
    extras_require={
        "test": [
            "pytest >= 7.0",
        ],
        "bench": [
            "pytest-codspeed >= 2.0",
        ],
    },
)
