#!/usr/bin/env python
from setuptools import setup

requires = ['func_prototypes', 'docopt', 'delnone', 'tqdm']
test_requires = ['pytest', 'tabulate']

setup(
    name='folds',
    version='0.1.0',
    packages=['folds'],
    install_requires = requires,
    tests_require = test_requires,
    extras_require = {
      'test': test_requires,
    },
    entry_points = {
      'console_scripts': [
        'folds = folds.ui:ui_main',
        ],
    },
    license='MIT',
    description='Composable single pass folds: sum, count, min/max, reservoir sampling and friends.',
    long_description_content_type='text/markdown',
    long_description=open('README.md').read(),
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
)
