# setup.py
from setuptools import setup, find_packages

setup(
    name="linkup",
    version="1.0.0",
    description="Detect broken links, missing anchors and duplicate ids on static websites",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "beautifulsoup4",
        "requests",
    ],
    extras_require={
        "test": ["pytest", "urllib3"],
    },
    entry_points={
        'console_scripts': [
            'linkup=linkup.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
