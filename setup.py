from setuptools import setup, find_packages

setup(
    name="growarray",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(
        where="src",
        exclude=("tests",)
    ),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.22",
        "pandas>=1.4",
        "matplotlib>=3.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
        "docs": ["sphinx", "myst-parser", "furo"],
    },
    entry_points={
        "console_scripts": [
            "growarray-demo=growarray.cli:main",
            "growarray-run=growarray.experiments.run_from_config:main",
        ],
    },
)
