from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="dateperiod",
    version="0.1.0",
    author="",
    author_email="",
    description="Half-open date periods: parsing, set algebra and JSON encoding",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["dateperiod", "dateperiod.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
    install_requires=[
        "pandas>=1.3.0",
        "python-dateutil>=2.8.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)
