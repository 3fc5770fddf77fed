import io
import os
import re

from setuptools import find_packages, setup


with io.open("flask_mfachain/__init__.py", "rt", encoding="utf8") as f:
    version = re.search(r"__version__ = \"(.*?)\"", f.read()).group(1)


def fpath(name):
    return os.path.join(os.path.dirname(__file__), name)


def read(fname):
    return open(fpath(fname)).read()


def desc():
    return read("README.rst")


setup(
    name="Flask-MFAChain",
    version=version,
    license="BSD",
    author="Flask-MFAChain contributors",
    description=(
        "Pluggable multi-factor authentication provider registry and"
        " validation dispatch for Flask applications."
    ),
    long_description=desc(),
    long_description_content_type="text/x-rst",
    packages=find_packages(exclude=["tests*"]),
    package_data={"": ["LICENSE"]},
    entry_points={
        "flask.commands": ["mfa=flask_mfachain.cli:mfa"],
    },
    include_package_data=True,
    zip_safe=False,
    platforms="any",
    install_requires=[
        "click>=8, <9",
        "Flask>=2, <4",
        "Flask-Babel>=1, <5",
        "PyYAML>=5.4, <7",
        "WTForms>=3, <4",
        "werkzeug<4",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Environment :: Web Environment",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.8",
)
