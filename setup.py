from setuptools import setup, find_packages

setup(
    name='rdfbridge',
    version='0.1.0',
    description='Turtle and JSON-LD parsing, cardinality-checked queries and relativizing Turtle serialization',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(include=["rdfbridge", "rdfbridge.*"]),
    include_package_data=True,

    license='Apache License 2.0',
    install_requires=[
        "rdflib>=7.0.0",
        "PyLD>=2.0.3,<3",
        "pydantic>=2.10",
        "PyYAML>=6.0",
        "aiofiles",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
        ],
        "remote": [
            "requests",
        ],
    },

    classifiers=[
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.11',
)
