# setup.py
from setuptools import setup, find_packages

setup(
    name="lust",
    version="0.1.0",
    description="A small Lisp with namespaces, syntax-quote and macros",
    packages=find_packages(include=["lust", "lust.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lust=lust.__main__:main"],
    },
    zip_safe=False,
)
