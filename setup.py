from setuptools import setup, find_packages

setup(
    name="statwatch",
    version="1.0.0",
    description="Polling monitor that raises alerts from a remote server's statistics endpoint",
    author="Boris Vereš",
    packages=find_packages(include=["statwatch", "statwatch.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0.0",
        "python-dotenv>=0.19.0",
        "aiohttp>=3.8.0",   # For HTTP client
        "tenacity>=8.0.0",  # For consecutive-error budget
    ],
    extras_require={
        "dev": [
            "pytest>=6.0.0",
            "pytest-asyncio>=0.21.0",
            "black>=21.0.0",
            "isort>=5.0.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "statwatch=statwatch.main:run",
        ]
    }
)
