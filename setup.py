from setuptools import setup, find_packages

# Base requirements - always needed
install_requires = [
    "PyYAML>=6.0",
    "xmltodict>=0.14.2",
]

setup(
    name="gattpath",
    version="0.3.0",
    description="Typed, sortable handles for BlueZ GATT object paths",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=install_requires,
    extras_require={
        "test": ["pytest>=8.0.0"],
    },
    entry_points={
        'console_scripts': [
            'gattpath=gattpath.cli:main',
        ],
    },
    python_requires='>=3.8',
)
