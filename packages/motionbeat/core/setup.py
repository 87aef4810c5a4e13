from setuptools import find_namespace_packages, setup

# Find all packages - physical structure matches import path
packages = find_namespace_packages(where="../..", include=["motionbeat.core", "motionbeat.core.*"])

setup(
    packages=packages,
    package_dir={"": "../.."},
)
