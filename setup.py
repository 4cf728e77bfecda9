import os
import io

from setuptools import setup, find_packages

cwd = os.path.abspath(os.path.dirname(__file__))

with io.open(os.path.join(cwd, "README.rst"), encoding="utf-8") as fd:
    long_description = fd.read()

VERSION = "1.0.0"

setup(
    name="radixcodec",
    version=VERSION,
    description=("Base58, Base16, Base64, UTF-8 and percent-encoding codecs."),
    long_description=long_description,
    long_description_content_type="text/x-rst",
    url="https://github.com/steinwurf/radixcodec",
    author="Steinwurf ApS",
    author_email="contact@steinwurf.com",
    license='BSD 3-clause "New" or "Revised" License',
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries",
        "Topic :: Utilities",
    ],
    keywords=["base58", "base64", "radix", "utf-8", "percent-encoding"],
    packages=find_packages(where="src", exclude=["test"]),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
)
