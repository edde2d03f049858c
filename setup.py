import re
import sys
from setuptools import setup, find_packages


def readme():
    with open('README.md', encoding="UTF-8") as f:
        return f.read()


def version():
    with open('cloudcontainer/__init__.py', encoding="UTF-8") as f:
        return re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE).group(1)


if sys.version_info < (3, 7):
    sys.exit('Python < 3.7 is not supported!')


setup(
    name='cloudcontainer',
    version=version(),
    description='Thin adapter to create, update, get and delete Azure Blob Storage containers',
    long_description_content_type="text/markdown",
    long_description=readme(),
    packages=find_packages(exclude=["tests.*", "tests"]),
    install_requires=[
        "azure-core>=1.26.0",
        "azure-storage-blob>=12.14.1",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[],
    include_package_data=True,
    keywords="python cloud azure storage blob container".split(" "),
    zip_safe=False,
)
