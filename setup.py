"""
CommBoard Setup Script
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="commboard",
    version="0.1.0",
    author="CommBoard Project",
    description="Community bulletin board: announcements, events, marketplace and contacts",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: End Users/Desktop",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Communications :: BBS",
    ],
    python_requires=">=3.10",
    install_requires=[
        "argon2-cffi>=23.1.0",
        "tomli>=2.0.0;python_version<'3.11'",
        "toml>=0.10.2",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "commboard=commboard.__main__:main",
        ],
    },
)
