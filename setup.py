from setuptools import find_packages, setup

VERSION = '1.0.0'


TEST_REQS = [
    'coverage>=4.2',
    'pycodestyle>=2.3.1',
    'pytest',
    'pytest-cov',
]


INSTALL_REQS = [
    'biopython>=1.80',
    'braceexpand>=0.1.2',
    'networkx>=2.0',
    'numpy>=1.13.1',
    'pandas>=1.5',
]


setup(
    name='trackmap',
    version='{}'.format(VERSION),
    packages=find_packages(exclude=['tests', 'tests.*']),
    description='Annotates a whole-genome profile table with reference features placed on non-overlapping tracks',
    install_requires=INSTALL_REQS,
    extras_require={
        'test': TEST_REQS,
        'dev': ['flake8'] + TEST_REQS,
    },
    tests_require=TEST_REQS,
    python_requires='>=3.8',
    test_suite='tests',
    entry_points={
        'console_scripts': [
            'trackmap = trackmap.main:main',
        ]
    },
)
