import setuptools
import sys

pure_python = False
pure_notice = "\n\n**Note!** *This package is the zero-dependency version of SHS. It computes identical digests, but cannot verify them against the OpenSSL reference provider. Use the [normal package](https://pypi.org/project/shs) unless you know why you need this one.*"

if '--pure' in sys.argv:
    pure_python = True
    sys.argv.remove('--pure')
    print("Building pure-python wheel")

exec(open("SHS/_version.py", "r").read())

with open("README.md", "r") as fh:
    long_description = fh.read()

if pure_python:
    pkg_name = "shspure"
    requirements = []
    long_description = long_description+pure_notice
else:
    pkg_name = "shs"
    requirements = ['cryptography>=3.1']

setuptools.setup(
    name=pkg_name,
    version=__version__,
    description="Pure-Python FIPS 180-4 SHA-1 and SHA-256 with streaming and one-shot interfaces",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    entry_points= {
        'console_scripts': [
            'shsum=SHS.Utilities.shsum:main',
        ]
    },
    install_requires=requirements,
    extras_require={
        'tests': ['pytest'],
    },
    python_requires='>=3.6',
)
