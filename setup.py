from setuptools import setup, find_packages

setup(
    name="unitext",
    version="0.1.0",
    description="Unicode text inspection and math-alphanumeric restyling utilities",
    packages=find_packages(include=["unitext", "unitext.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
        "fonttools",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["unitext=unitext.cli:main"],
    },
    python_requires=">=3.12",
)
