from setuptools import setup, find_packages

setup(
    name="hookrunner",
    version="1.0.0",
    packages=find_packages(include=["hookrunner", "hookrunner.*"]),
    install_requires=[
        "pyyaml>=5.4",
        "jsonschema>=4.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0", "pytest-asyncio>=0.21"],
    },
    python_requires=">=3.10",
    package_data={
        "hookrunner": ["schemas/*.json"],
    },
    entry_points={
        "console_scripts": [
            "hookrunner=hookrunner.cli:main",
        ],
    },
)
