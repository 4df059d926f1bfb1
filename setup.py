from setuptools import setup, find_packages

setup(
    name="tally",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        # CLI interface
        "click",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "tally=tally.cli:main",
        ],
    },
    python_requires=">=3.8",
    description="League standings from semicolon-delimited match results",
    keywords="tournament, standings, league table, sports",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Programming Language :: Python :: 3",
    ],
)
