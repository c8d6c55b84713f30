from setuptools import setup, find_packages

setup(
    name="persian-chrono",
    version="0.1.0",
    description="Gregorian <-> Persian (Jalali) date conversion for datetime values",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pytz>=2023.3",
        "persiantools>=4.0.0",
        "python-dotenv>=1.0.0"
    ],
    extras_require={
        "test": [
            "pytest>=7.4.3",
            "pytest-cov>=4.1.0"
        ]
    }
)
