# setup.py
from setuptools import setup, find_packages

setup(
    name="routenav",
    version="0.3.0",
    description="Route-definition reader and language server for React Router style routes files",
    packages=find_packages(include=["routenav", "routenav.*", "routenav_lsp", "routenav_lsp.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol>=2023.0.0",
    ],
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
    entry_points={
        "console_scripts": [
            "routenav=routenav.__main__:main",
            "routenav-ls=routenav_lsp.server:main",
        ],
    },
    zip_safe=False,
)
