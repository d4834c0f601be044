"""Setup configuration for ptime package."""

from setuptools import find_packages, setup

# Read version from __version__.py
version = {}
with open("src/python/ptime/__version__.py") as f:
    exec(f.read(), version)

# Read README
with open("README.md", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="ptime",
    version=version["__version__"],
    description="Analyze photo timestamps from JPEG files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="ptime developers",
    python_requires=">=3.11",
    package_dir={"": "src/python"},
    packages=find_packages(where="src/python"),
    install_requires=[
        "click>=8.1.0",
        "pyyaml>=6.0.1",
        "pandas>=2.1.4",
        "exifread>=3.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "pytest-mock>=3.12.0",
            "pillow>=10.2.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ptime=ptime.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Intended Audience :: End Users/Desktop",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Topic :: Multimedia :: Graphics",
    ],
)
