from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = [line for line in f.read().splitlines() if line and not line.startswith('#')]

setup(
    name = 'propconf',
    version = '0.1.0',
    description = 'Typed settings persisted to human-editable .properties files',
    packages = find_packages(include=['propconf', 'propconf.*']),
    python_requires = '>=3.10',
    install_requires = required,
    extras_require = {
        'test': ['pytest>=7.0', 'pytest-cov']
    }
)
