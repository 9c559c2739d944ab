from setuptools import setup, find_packages

setup(
    name="geocells",
    version="0.1.0",
    description="Geohash encoding, adjacency and circle coverage",
    packages=find_packages(exclude=["*.tests", "*.tests.*"]),
    install_requires=[
        "numpy>=1.21.0",
        "pandas>=1.3.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'geocells=geocells.explorer:main',
        ],
    },
    python_requires=">=3.8",
)
