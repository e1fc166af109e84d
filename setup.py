# setup.py
from setuptools import setup, find_packages

setup(
    name="sigma",
    version="0.1.0",
    description="Minimal embeddable expression language for calculators",
    packages=find_packages(include=["sigma", "sigma.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["sigma=sigma.__main__:main"],
    },
    zip_safe=False,
)
