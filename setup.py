# setup.py
from setuptools import setup, find_packages

setup(
    name="chao",
    version="0.1.0",
    description="A small s-expression language engine with an interactive REPL",
    packages=find_packages(include=["chao", "chao.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["chao = chao.repl:main"],
    },
    zip_safe=False,
)
