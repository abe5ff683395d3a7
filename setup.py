#!/usr/bin/env python

from setuptools import setup

def read_description():
    import os
    path = os.path.join(os.path.dirname(__file__), 'README.rst')
    try:
        with open(path) as f:
            return f.read()
    except IOError:
        return 'No description found'

setup(
    name='bencodetree',
    version='1.0.0',
    description='Bencode decoder and canonical encoder with a typed value tree',
    long_description=read_description(),
    packages=['bencodetree'],
    install_requires=[],
    extras_require={'test': ['pytest']},
    license='BSD',
    python_requires='>=3.6',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Communications :: File Sharing',
        'Topic :: Software Development :: Libraries',
    ],
    entry_points={ 'console_scripts': [
        'bencodetree = bencodetree.cmd:main',
    ]},
)
