import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="vpxstruct",
    version="0.0.1",
    author="Gianluca Pacchiella",
    author_email="gp@ktln2.org",
    description="Records of the pinball table files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/gipi/vpxstruct",
    packages=setuptools.find_packages(exclude=['tests']),
    scripts=['scripts/vpxdump.py'],
    install_requires=[
        'pillow',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GPLv2 License",
        "Operating System :: OS Independent",
    ],
)
