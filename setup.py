from setuptools import find_packages, setup

setup(
  name="eots",
  version="0.1.0",
  description="Extractable one-time signatures on secp256k1: nonce reuse reveals the private key",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(include=["eots", "eots.*"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
  ],
  install_requires=[
    "coincurve>=18",
    "cryptography>=35",
    "colorama>=0.4",
    "pyperclip>=1.8",
    "tqdm>=4.62",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit"],
    "dev": ["tox", "isort", "yapf"],
  },
  include_package_data=True,
  entry_points=dict(console_scripts=["eots = eots.__main__:main"]),
)
