from setuptools import setup, find_packages

setup(
    name="webstrap",
    version="0.1.0",
    description="Webstrap: install and enable a web server on Debian or Red Hat hosts",
    author="Alkama Sudad",
    packages=find_packages(exclude=["tests", "tests.*"]),  # webstrap + subpackages
    install_requires=["rich", "psutil", "requests"],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "webstrap=webstrap.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
    ],
)
