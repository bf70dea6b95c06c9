from pathlib import Path
from setuptools import setup, find_packages

# Read long description from README
root = Path(__file__).parent
long_description = (root / "README.md").read_text(encoding="utf-8")

setup(
    name="slicedeck",
    version="0.1.0",
    description="One markdown document in, one self-contained HTML slideshow out",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Bilal",
    packages=find_packages(exclude=("tests*", "examples*")),
    python_requires=">=3.9",
    install_requires=[
        "PyYAML>=6.0.1",
        "mistune>=3.0.2",
        "Jinja2>=3.1.3",
        "python-dotenv>=1.0.1",
        "requests>=2.32.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "slicedeck = slicedeck.__main__:cli_entry",
        ]
    },
    include_package_data=True,
    package_data={
        "slicedeck.assets": ["bundled/templates/*.html", "bundled/resources/*"],
    },
    license="MIT",
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "License :: OSI Approved :: MIT License",
    ],
)
