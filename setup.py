from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = f.read().splitlines()

setup(
    name = 'appconfig',
    version = '0.1.0',
    description = 'Ordered configuration source registry with typed dotted-path lookups',
    packages = find_packages(include=['appconfig', 'appconfig.*']),
    python_requires = '>=3.9',
    install_requires = required,
    extras_require = {
        'test': ['pytest>=7.0', 'pytest-cov'],
    }
)
