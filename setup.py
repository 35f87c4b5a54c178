from setuptools import find_packages, setup

setup(
    name="contour-geometry",
    version="0.1.0",
    packages=find_packages(include=["contour_geometry", "contour_geometry.*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
        ]
    },
)
