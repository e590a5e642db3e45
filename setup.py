from setuptools import setup, find_packages

setup(
    name="corecontracts",
    version="2.0.0",
    description="Shared request and response contracts for IoT device services",
    packages=find_packages(include=["corecontracts", "corecontracts.*"]),
    include_package_data=True,
    install_requires=[
        "pydantic>=2.11.0",
        "sqlalchemy>=2.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.3.0",
            "pytest-cov>=4.1.0",
            "black>=23.3.0",
            "mypy>=1.9.0",
            "ruff>=0.1.0",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
    entry_points={
        "console_scripts": [
            "corecontracts=corecontracts.cli:main",
        ],
    },
)
