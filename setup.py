from setuptools import setup, find_packages

setup(
    name="distmap",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["compute_distance_map"],
    install_requires=[
        "torch>=1.9.0",
        "matplotlib",
        "numpy",
        "pillow",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "compute-distance-map=compute_distance_map:main",
        ],
    },
    author="distmap developers",
    description="5x5 chamfer distance maps of binary images",
    keywords="distance transform, chamfer, image analysis, morphology",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
    ],
    python_requires=">=3.8",
)
