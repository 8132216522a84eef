# coding=utf-8
"""Setup package 'rationals'."""

from setuptools import setup

with open('README.md') as file:
    long_description = file.read()

setup(
    name="rationals",
    version="0.1.0",
    author="Michael Amrhein",
    author_email="michael@adrhinum.de",
    description="Exact rational numbers with lazy normalization",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={'': 'src'},
    packages=['rationals'],
    python_requires=">=3.7",
    extras_require={
        "test": ["pytest", "hypothesis"],
        },
    license='BSD',
    keywords='rational number datatype fraction',
    platforms='all',
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: Implementation :: CPython",
        "Programming Language :: Python :: Implementation :: PyPy",
        "Topic :: Software Development",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Python Modules"
        ],
    zip_safe=False,
    )
