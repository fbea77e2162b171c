"""
Setup file.
"""

import os

from setuptools import find_packages, setup

URL = "https://github.com/zackees/fqbn"
KEYWORDS = "embedded arduino fqbn board arduino-cli platformio"
HERE = os.path.dirname(os.path.abspath(__file__))

with open(os.path.join(HERE, "src", "fqbn", "__init__.py"), encoding="utf-8") as f:
    VERSION = next(
        line.split('"')[1] for line in f if line.startswith("__version__")
    )


if __name__ == "__main__":
    setup(
        name="fqbn",
        version=VERSION,
        description="Arduino FQBN (Fully Qualified Board Name) parsing and manipulation",
        maintainer="Zachary Vorhies",
        keywords=KEYWORDS,
        url=URL,
        license="MIT",
        python_requires=">=3.9",
        package_dir={"": "src"},
        packages=find_packages("src"),
        install_requires=[],
        extras_require={"test": ["pytest"]},
        entry_points={"console_scripts": ["fqbn = fqbn.cli:main"]},
        include_package_data=True)
