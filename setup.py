from setuptools import setup, find_packages

setup(
    name="genalg",
    version="0.1.0",
    description="Generic genetic algorithm engine with pluggable genotypes and operators",
    packages=find_packages(include=["genalg", "genalg.*"]),
    python_requires=">=3.10",
    install_requires=[
        # Data processing
        "numpy>=1.26.0",

        # Configuration & logging
        "pyyaml>=6.0.2",
        "loguru>=0.7.2",

        # Validation
        "pydantic>=2.9.0",

        # Command line
        "click>=8.1.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.3.0",
            "pytest-cov>=5.0.0",
            "pytest-mock>=3.14.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "genalg=genalg.cli:cli",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
    ],
)
