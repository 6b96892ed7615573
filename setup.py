import os
from setuptools import setup, find_packages


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname), encoding='utf-8').read()


setup(
    name="logexclusion",
    version='0.1.0',
    description="Declarative Google Cloud Logging exclusion resources",
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
    classifiers=[
        "Topic :: System :: Systems Administration",
        "Topic :: System :: Logging"
    ],
    license="Apache-2.0",
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.10',
    entry_points={
        'console_scripts': [
            'logexclusion = logexclusion.cli:main']},
    install_requires=[
        "google-api-python-client>=2.0,<3.0",
        "google-auth>=2.0,<3.0",
        "PyYAML>=5.3.1",
        "jsonschema>=3.2.0",
        "argcomplete",
        "tabulate>=0.8.7",
    ],
    extras_require={
        'test': [
            "pytest",
            "httplib2",
        ]},
)
