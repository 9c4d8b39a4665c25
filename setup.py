"""The neo4kanjidic setup.py script."""

from setuptools import setup, find_packages


setup(
    name='neo4kanjidic',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.8',
    install_requires=[
        'neo4j>=5',
        'pydantic>=2',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
