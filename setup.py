from setuptools import setup, find_packages

# Read long description from README
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="csv2vtt",
    version="1.0.0",
    author="csv2vtt Contributors",
    description="Convert CSV caption sheets into WebVTT subtitle files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/csv2vtt/csv2vtt",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Video",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.8",
    install_requires=[
        "requests>=2.28.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "csv2vtt=csv2vtt.cli:main",
        ],
    },
    include_package_data=True,
    keywords="vtt webvtt subtitles captions csv",
    project_urls={
        "Bug Reports": "https://github.com/csv2vtt/csv2vtt/issues",
        "Source": "https://github.com/csv2vtt/csv2vtt",
        "Documentation": "https://github.com/csv2vtt/csv2vtt#readme",
    },
)
