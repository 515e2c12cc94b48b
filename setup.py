# setup.py
from setuptools import setup, find_packages

setup(
    name="lispy",
    version="0.1.0",
    description="Tree-walking evaluator for a small Lisp with quoted lists, currying and closures",
    packages=find_packages(include=["lispy", "lispy.*"]),
    python_requires=">=3.10",
    install_requires=[
        "termcolor>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0", "hypothesis>=6.0"],
    },
    entry_points={
        "console_scripts": [
            "lispy=lispy.repl:main",
        ],
    },
    zip_safe=False,
)
