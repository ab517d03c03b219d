import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="regutils",
    version="0.1.0",
    author="Mark Gordon",
    author_email="msg@clinc.com",
    description="Docker registry credential and image reference helpers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/clinc/regutils",
    packages=setuptools.find_packages(exclude=["tests"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        "click>=7.0",
    ],
    entry_points={"console_scripts": ["regutils = regutils.cli:main"]},
    test_suite="tests",
    python_requires=">=3.7",
)
