from setuptools import find_packages, setup

setup(
    name="xtalsym",
    version="0.1.0",
    description="Space groups, symmetry operations and reciprocal asymmetric units of 3D crystals",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
)
