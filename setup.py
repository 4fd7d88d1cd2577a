from setuptools import setup, find_packages

setup(
    name='firebehavior',
    version='0.1.0',
    packages=find_packages(),
    package_data={
        'firebehavior.models': ['*.json'],
    },
    install_requires=[
        'numpy',
        'matplotlib',
    ],
    extras_require={
        'dev': [
            'pytest>=7.0',
            'pytest-cov>=4.0',
            'ruff>=0.1.0',
        ],
    },
    python_requires='>=3.9',
)
