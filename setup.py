from setuptools import setup, find_packages

setup(
    name="csvframe",
    version="0.1",
    description="Load delimited numeric text files into immutable in-memory frames with head/tail/sample/min-max views.",
    packages=find_packages(exclude=["tests"]),
    py_modules=["main"],
    install_requires=[
        "pandas>=1.5",
        "numpy>=1.24",
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    author="Your Name",
    author_email="your.email@example.com",
    url="https://github.com/yourusername/csvframe",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
