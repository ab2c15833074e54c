from os import path

import setuptools

this_directory = path.abspath(path.dirname(__file__))
with open(path.join(this_directory, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

with open(path.join(this_directory, "requirements.txt")) as f:
    requirements = f.read().splitlines()

entry_points = {"console_scripts": ["monero-request = monerorequest.cli.cli:cli"]}

setuptools.setup(
    name="monero-request",
    version="0.1.0",
    description="Encode and decode Monero payment requests",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=setuptools.find_packages(include=["monerorequest", "monerorequest.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    entry_points=entry_points,
)
