from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

from setuptools import find_packages, setup


loader = SourceFileLoader("termdeck", "./src/termdeck/__init__.py")
termdeck = ModuleType(loader.name)
loader.exec_module(termdeck)

setup(
    name="termdeck",
    version=termdeck.__version__,  # type: ignore
    description="Present Markdown-powered slide decks in the terminal.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    python_requires=">=3.11.0",
    package_dir={"": "src"},
    packages=find_packages("src", exclude=["tests"]),
    entry_points={"console_scripts": ["termdeck=termdeck.cli:main"]},
    install_requires=[
        "appdirs",
        "cyclopts>=3",
        "pydantic>=2",
        "PyYAML",
        "rich",
        "watchdog",
    ],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.12",
        "Topic :: Multimedia :: Graphics :: Presentation",
    ],
)
