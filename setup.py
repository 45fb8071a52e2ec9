"""Setup script for linopt package."""

from setuptools import setup, find_packages

if __name__ == "__main__":
    setup(
        name="linopt",
        version="0.1.0",
        description="Named-entity builder for mixed integer linear programs",
        packages=find_packages(where=".", include=["linopt", "linopt.*"]),
        package_dir={"": "."},
        python_requires=">=3.8",
        install_requires=[
            "gurobipy",
            "numpy",
            "PyYAML",
        ],
        extras_require={
            "test": ["pytest"],
        },
    )
