"""
radarscope - Ultrasonic Radar Sweep Viewer

Auto-detects an Arduino ultrasonic radar over serial and shows its readings
as a sweeping radar display.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="radarscope",
    version="1.0.0",
    description="Ultrasonic radar sweep viewer with serial auto-detection",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="radarscope developers",
    author_email="",
    license="MIT",

    packages=find_packages(exclude=["tests", "tests.*"]),

    install_requires=[
        "numpy>=1.21.0",
        "pyserial>=3.5",
        "pygame>=2.1.0",
    ],

    extras_require={
        "dev": [
            "pytest>=7.0",
        ],
    },

    entry_points={
        "console_scripts": [
            "radarscope=radarscope.__main__:main",
        ],
    },

    python_requires=">=3.8",

    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Scientific/Engineering",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
)
