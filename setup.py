# setup.py
from setuptools import setup, find_packages

setup(
    name="truthtable",
    version="0.1.0",
    description="Truth tables and minimal formulas from boolean Python code",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pandas>=2.0.0",
        "sympy>=1.12",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.10",
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
