"""Setup script for the project."""

from setuptools import setup, find_packages

setup(
    name="savorycircle-api",
    version="1.0.0",
    description="SavoryCircle meal planning and recipe sharing API",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.27",
        "httpx>=0.27",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "python-dotenv>=1.0",
        "supabase>=2.10",
        "postgrest>=0.18",
        "langchain-core>=0.2",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.23",
        ],
    },
    python_requires=">=3.10",
)
