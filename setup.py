from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pyterranoise",
    version="0.1.0",
    author="Boris Gailleton",
    author_email="boris.gailleton@univ-rennes.fr",
    description="Deterministic Perlin, Simplex and Diamond-Square noise for procedural terrain",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["pyterranoise", "pyterranoise.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering",
        "Topic :: Multimedia :: Graphics :: 3D Modeling",
    ],
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
        "matplotlib>=3.3.0",
        "click>=7.0",
        "pillow>=8.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    keywords="procedural noise perlin simplex diamond-square terrain heightmap fbm",
    entry_points={
        "console_scripts": [
            "pnoise-sample=pyterranoise.cli.noise_commands:noise_sample",
            "pnoise-heightmap=pyterranoise.cli.heightmap_commands:heightmap",
            "pnoise-colorize=pyterranoise.cli.heightmap_commands:colorize",
        ],
    },
)
