"""
    Copyright 2018 EPAM Systems, Inc.

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.
"""
from setuptools import find_packages, setup
from os import path

CARBUILDER_DESCRIPTION = ('Carbuilder is a small Python library and command '
                          'line tool, which demonstrates the Builder design '
                          'pattern by assembling cars step by step.')

this_directory = path.abspath(path.dirname(__file__))
with open(path.join(this_directory, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='carbuilder',
    version='1.0.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    install_requires=[
        'click>=7.1.2',
        'colorama>=0.4.6',
        'pyyaml>=6.0.1',
        'tabulate>=0.9.0'
    ],
    extras_require={
        'test': ['pytest']
    },
    entry_points='''
        [console_scripts]
        carbuilder=carbuilder.cli.handlers:carbuilder
    ''',
    long_description=long_description,
    long_description_content_type='text/markdown',
    description=CARBUILDER_DESCRIPTION,
    keywords=['BUILDER', 'DESIGN PATTERNS', 'DIRECTOR'],
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python :: 3.10'
    ],
)
