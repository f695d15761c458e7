# setup.py
from setuptools import setup, find_packages

setup(
    name="easel",
    version="0.1.0",
    description="Tree-walking evaluator for Easel programs delivered as JSON ASTs",
    packages=find_packages(include=["easel", "easel.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["easel=easel.__main__:main"],
    },
    zip_safe=False,
)
