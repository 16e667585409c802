from setuptools import setup, find_packages

setup(
    name="ytscript",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "requests>=2.31.0",
        "defusedxml>=0.7.1",
        "python-dotenv>=1.0.0",
        "colorlog>=6.7.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ytscript=ytscript.cli:main",
        ],
    },
    python_requires=">=3.8",
    description="Fetch, translate and decode the caption tracks of YouTube videos",
    author="Venkatesh Murugadas",
)
