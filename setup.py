# setup.py
from setuptools import setup, find_packages

setup(
    name="link_grapher",
    version="0.1.0",
    description="Concurrent single-host crawler that prints the site's link graph",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"link_grapher": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
        "lxml>=4.9",
        "click>=8.1",
        "Jinja2>=3.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": ["grapher=link_grapher.cli:cli"],
    },
    python_requires=">=3.11",
)
