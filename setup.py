# setup.py
from setuptools import setup, find_packages

setup(
    name="studiosg",
    version="0.3.0",
    description="StudioSG – retained-mode scene graph bridged to a rendering backend",
    packages=find_packages(include=["studiosg", "studiosg.*"]),
    install_requires=[
        "numpy>=1.20.0",
        "Pillow>=9.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["studiosg=studiosg.app.batch:main"],
    },
)
