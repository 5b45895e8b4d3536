from setuptools import setup, find_packages

setup(
    name="tux_levels",
    version="0.1.0",
    description="Loader for SuperTux-style level documents",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "numpy>=1.24"
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "tux_levels=tux_levels.main:main",
        ],
    },
)
