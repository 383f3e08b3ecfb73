# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="mutation-harness",
    version="0.1.0",
    description="Snapshot-style mutation test harness driven by a directory hierarchy of cases",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["mutation_harness", "mutation_harness.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pytest",  # pytest parameter adapter (mutation_harness.interface.pytest_support)
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'mutation-harness=mutation_harness.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Framework :: Pytest",
    ],
)
