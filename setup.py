"""
Setup script for the mindforge package.

Installs the ``mindforge`` package from src/ and the ``mindforge``
console script.
"""

from setuptools import setup, find_packages

setup(
    name="mindforge",
    version="1.0.0",
    description="MindForge - endless AI-generated logic puzzle quiz for the terminal",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "anthropic>=0.30.0",
        "pydantic>=2.5.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "httpx",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "mindforge=mindforge.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Games/Entertainment :: Puzzle Games",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
