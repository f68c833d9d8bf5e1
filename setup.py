from setuptools import setup, find_packages

setup(
    name="connectfour",
    version="0.1.0",
    description="Rules engine for the Connect Four drop-disc game",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
