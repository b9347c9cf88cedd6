import os
from setuptools import setup, find_packages

from codedanswer import __version__

root_dir = os.path.dirname(os.path.abspath(__file__))
req_file = os.path.join(root_dir, "requirements.txt")
with open(req_file) as f:
    requirements = f.read().splitlines()

setup(
    name="coded-answer",
    version=__version__,
    description=f"Coded or free text clinical answers and their display",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=requirements,
    extras_require={
        "test": ["pytest"]
    },
    scripts=["scripts/format_answers.py"],
)
