from setuptools import setup, find_packages

setup(
    name="aerospace-ipc",
    version="0.3.0",
    description="Python client for the AeroSpace window manager IPC socket",
    author="phisanti",
    author_email="tisalon@outlook.com",
    license="MIT",
    packages=find_packages(exclude=("tests", "tests.*", "scripts")),
    install_requires=[
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.10",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
)
