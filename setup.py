from setuptools import find_packages, setup


def read_requirements():
    with open("requirements.txt") as f:
        return [line for line in f.read().splitlines() if line.strip()]


setup(
    name="multirow-taskbar",
    version="0.1.0",
    description="Layout planning core for a taskbar that wraps window buttons across rows",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=read_requirements(),
    extras_require={
        "test": [
            "pytest",
        ],
    },
    packages=find_packages(exclude=["tests"]),
    include_package_data=True,
)
