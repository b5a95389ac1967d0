from setuptools import setup, find_packages

setup(
    name="biasvar",
    version="1.0",
    description="BiasVar: bias-variance trade-off of polynomial regression",
    author="marcu",
    packages=find_packages(include=["biasvar", "biasvar.*"]),
    python_requires=">=3.10",
    install_requires=["numpy", "polars>=1.0", "tqdm", "plotly"],
    extras_require={"test": ["pytest"]},
)
