from setuptools import setup, find_namespace_packages
import re
from pathlib import Path

_version_re = re.compile(r"^__version__\s*(?::\s*\w+\[?\w*\]?)?\s*=\s*['\"]([^'\"]+)['\"]", re.M)


def file_getVersion(rel_path: str) -> str:
    """
    Retrieve the version string from the specified file.
    """
    version_file = Path(__file__).parent / rel_path
    if not version_file.exists():
        raise RuntimeError(f"Version file {rel_path} not found.")

    with open(version_file, 'r') as f:
        content = f.read()
        match = _version_re.search(content)
        if not match:
            raise RuntimeError(f"Could not find __version__ in {rel_path}")
        return match.group(1)


setup(
    name='parencalc',
    version=file_getVersion('parencalc/calc.py'),
    description='A calculator for fully-parenthesized arithmetic expressions',
    author='FNNDSC',
    author_email='rudolph.pienaar@childrens.harvard.edu',
    url='https://github.com/FNNDSC/parencalc',
    packages=find_namespace_packages(include=['parencalc', 'parencalc.*']),
    python_requires='>=3.11',
    install_requires=[
        'appdirs',
        'click',
        'loguru',
        'prompt_toolkit',
        'pydantic>=2',
        'pydantic-settings',
        'rich',
    ],
    license='MIT',
    entry_points={
        'console_scripts': [
            'parencalc = parencalc.calc:main'
        ]
    },
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
    extras_require={
        'none': [],
        'dev': [
            'pytest>=7.1',
            'pytest-asyncio',
        ]
    }
)
