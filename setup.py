from setuptools import setup, find_packages

setup(
    name="runway",
    version="0.1.0",
    description="Airline-style command-line parsing engine for multi-level CLI tools.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich",
        "prompt_toolkit",
        "pydantic>=2",
        "PyYAML",
        "toml",
        "python-json-logger>=3.1",
        "python-dateutil",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
