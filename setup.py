from setuptools import setup

# install with: pip install -e .
# tests: pip install -e .[test] && pytest

setup(
    name='wordle',
    version='0.2.0',
    packages=['wordle'],
    package_data={
        'wordle': ['dictionary.txt'],
    },
    python_requires='>=3.8',
    install_requires=[
        'click',
        'rich',
        'urwid',
        'blinker',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'wordle = wordle.cli:cli',
        ],
    },
)
