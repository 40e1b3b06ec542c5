from setuptools import find_namespace_packages, setup

setup(
    name="pymos",
    version="0.1.0",
    author="daryl herzmann",
    author_email="akrherz@gmail.com",
    packages=find_namespace_packages(where="src", include=["pymos*"]),
    package_dir={"": "src"},
    keywords=["weather", "mos"],
    classifiers=[],
    license="Apache",
    description=(
        "Decoder for the NWS GFS Model Output Statistics text bulletin."
    ),
    python_requires=">=3.9",
    install_requires=[
        "beautifulsoup4",
        "click",
        "httpx",
        "pydantic>=2",
    ],
    extras_require={
        "test": ["pytest", "pytest-httpx"],
    },
    entry_points={
        "console_scripts": ["pymos = pymos.cli:main"],
    },
)
