import os
from setuptools import setup, find_packages

# Import version from the package without importing the whole package
with open(os.path.join('gist_log', '__init__.py'), 'r') as f:
    for line in f:
        if line.startswith('__version__'):
            version = line.split('=')[1].strip().strip('"').strip("'")
            break

setup(
    name="gist-log",
    version=version,
    packages=find_packages(exclude=["tests"]),
    install_requires=[
        "pyyaml>=6.0,<7.0",
        "requests>=2.28,<3.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "gist-log=gist_log:main",
        ],
    },
    author="gist-log contributors",
    author_email="",
    description="Interactive daily work log kept in a GitHub Gist",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Environment :: Console",
        "Topic :: Office/Business",
        "Topic :: Utilities",
    ],
    python_requires=">=3.8",
    include_package_data=True,
)
