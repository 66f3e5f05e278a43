#!/usr/bin/env python3

import io
import re
from os.path import dirname, join

from setuptools import find_packages, setup


def read(*names, **kwargs):
    return io.open(
        join(dirname(__file__), *names),
        encoding=kwargs.get('encoding', 'utf8'),
    ).read()


tests_require = [
    'pytest>=3.0',
    'pytest-asyncio',
    'pytest-mock',
]

setup(
    name='vendaio',
    version='0.1.0',
    license='BSD license',
    description='Async client for the Vend retail API.',
    long_description='%s\n%s' % (
        re.compile('^.. start-badges.*^.. end-badges', re.M | re.S)
        .sub('', read('README.rst')),
        re.sub(':[a-z]+:`~?(.*?)`', r'``\1``', read('CHANGELOG.rst')),
    ),
    packages=find_packages('src'),
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.6',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Framework :: AsyncIO',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: Unix',
        'Operating System :: POSIX',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.6',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Utilities',
    ],
    keywords=[
        'rest', 'async', 'asyncio', 'vend',
    ],
    install_requires=[
        'aiostream',
        'aiohttp',
    ],
    tests_require=tests_require,
    extras_require={
        'tests': tests_require,
        'docs': [
            'sphinx',
            'sphinx_rtd_theme',
            'sphinxcontrib-asyncio',
            'sphinx-autodoc-typehints',
        ],
    },
)
