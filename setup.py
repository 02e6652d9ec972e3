from setuptools import find_packages, setup

with open("requirements.txt") as f:
    dependencies = f.read().splitlines()

setup(
    name="oscsend",
    version="1.0.0",
    description="Encode Open Sound Control 1.0 messages and send them over UDP",
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.8",
    install_requires=dependencies,
    extras_require={"test": ["pytest", "oscpy"]},
    entry_points={"console_scripts": ["oscsend = oscsend.cli:main"]},
)
