"""
Setup configuration for the project.
Allows the package to be installed in development mode.
"""

from setuptools import setup, find_packages

setup(
    name="economic-client",
    version="1.0.0",
    description="Client library for the e-conomic SOAP API (invoices, debtors, lines)",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "zeep>=4.2.1",
        "requests>=2.31.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
    python_requires=">=3.8",
)
