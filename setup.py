# setup.py
from setuptools import setup, find_packages

setup(
    name="astlisp",
    version="0.3.0",
    description="Evaluator for a minimal Lisp given as a JSON-encoded syntax tree",
    packages=find_packages(include=["astlisp", "astlisp.*", "astlisp_lsp", "astlisp_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7",
            "hypothesis>=6",
        ],
    },
    entry_points={
        "console_scripts": [
            "astlisp=astlisp.__main__:main",
            "astlisp-ls=astlisp_lsp.server:main",
            "astlisp-repl=astlisp_lsp.repl_server:main",
        ],
    },
    zip_safe=False,
)
