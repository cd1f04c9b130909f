"""
Set up package.
Required modules: pydantic_core, pydantic (sequences.py, objects.py), toolz (objects.py)
Test modules: pytest, pytest-asyncio, hypothesis
"""
from setuptools import setup, find_packages

setup(
    name='fntools',
    version='0.1',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    python_requires='>=3.10',
    install_requires=[
        'pydantic_core',
        'pydantic>=2',
        'toolz',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-asyncio',
            'hypothesis',
        ],
    },
)
