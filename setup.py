"""
setup.py

Установка пакета peg_triangle.

Использование:
    pip install -e .
    pip install -e .[test]
"""

from setuptools import setup, find_packages

setup(
    name="peg_triangle",
    version="1.0.0",
    description="Triangle Peg Solitaire board engine and exhaustive game counter",
    packages=find_packages(include=["peg_triangle", "peg_triangle.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "peg-triangle=peg_triangle.cli:main",
        ],
    },
    zip_safe=False,
)
