"""Install DAV accounts package."""

from setuptools import setup, find_packages

setup(
    name='dav-accounts',
    version='0.1.0',
    packages=find_packages(exclude=['*tests*']),
    scripts=['bin/dav-accounts'],
    install_requires=[
        "sqlalchemy>=1.4",
        "flask",
        "flask-sqlalchemy>=3.0",
        "click",
        "python-json-logger>=3.1",
    ],
    extras_require={
        'test': [
            "pytest",
            "hypothesis",
            "mimesis",
        ]
    },
    zip_safe=False
)
