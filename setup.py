"""
Setup script for docmerge.

Install with ``pip install -e .``; add the ``server`` extra for the HTTP
service and ``dev`` for the test suite.
"""

from setuptools import setup, find_packages
from pathlib import Path

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding='utf-8')

setup(
    name="docmerge",
    version="1.0.0",
    description="Merge PDFs, images and office documents into a single PDF from the command line or over HTTP",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="docmerge Contributors",
    author_email="",
    packages=find_packages(exclude=["tests", "tests.*", "apps", "apps.*"]),
    install_requires=[
        "pypdf[crypto]>=3.0.0",
        "Pillow>=10.0.0",
        "reportlab>=4.0.0",
        "python-docx>=1.1.0",
        "openpyxl>=3.1.0",
        "xlrd>=2.0.1",
        "Markdown>=3.5",
        "click>=8.0.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "server": [
            "fastapi>=0.100.0",
            "python-multipart>=0.0.6",
            "uvicorn>=0.23.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "httpx>=0.24.0",
            "xlwt>=1.3.0",
            "fastapi>=0.100.0",
            "python-multipart>=0.0.6",
        ],
    },
    entry_points={
        "console_scripts": [
            "docmerge=docmerge.cli:cli",
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: End Users/Desktop",
        "Intended Audience :: Developers",
        "Topic :: Office/Business",
        "Topic :: Utilities",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
    keywords="pdf merge combine images docx xlsx pptx markdown html cli",
    license="MIT",
    include_package_data=True,
    zip_safe=False,
)
