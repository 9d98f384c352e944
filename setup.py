from setuptools import find_packages, setup

classifiers = [
    "License :: OSI Approved :: MIT License",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.7",
    "Programming Language :: Python :: 3.8",
    "Programming Language :: Python :: 3.9",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3 :: Only",
    "Topic :: Software Development :: Libraries",
    "Topic :: System :: Networking",
]

with open("README.md", "r") as fp:
    long_description = fp.read()

setup(
    name="nt-status",
    version="0.1.0",
    description="Windows NT status codes, their symbolic names and error projection",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=classifiers,
    python_requires=">=3.7",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=["requests>=2.23,<3.0", "typing_extensions>=4.0"],
    extras_require={"test": ["pytest"]},
    keywords=[
        "ntstatus",
        "windows",
        "nt",
        "status",
        "smb",
        "msrpc",
        "lsa",
        "error",
        "library",
    ],
)
