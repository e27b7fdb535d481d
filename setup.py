from setuptools import setup, find_namespace_packages

setup(
    name="manuscript-metrics",
    version="0.1.0",
    description="Word, reference and structure metrics for LaTeX manuscripts",
    packages=find_namespace_packages(include=["src", "src.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",
        "python-dotenv",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
