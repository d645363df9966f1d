from setuptools import setup, find_packages

setup(
    name="ipmaclient",
    version="0.1.0",
    description="Async client for the IPMA open-data weather API",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        'httpx>=0.24.0',
        'pydantic>=2.0.0',
        'PyYAML>=6.0',
        'tabulate>=0.9.0',
        'typing_extensions>=4.5.0'
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
            'pytest-asyncio>=0.21.0'
        ]
    },
    entry_points={
        'console_scripts': [
            'ipmaclient=ipmaclient.cli:main'
        ]
    }
)
