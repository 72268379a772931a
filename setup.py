from setuptools import find_packages, setup

with open("requirements-core.txt", encoding="utf-8") as f:
    install_requires = [line for line in f.read().splitlines() if line]

setup(
    name="pathguard",
    version="1.0.0",
    description="Normalize, validate and confine untrusted path strings",
    packages=find_packages(include=["pathguard", "pathguard.*"]),
    install_requires=install_requires,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "pathguard=pathguard.cli:main",
        ],
    },
)
