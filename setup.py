from setuptools import find_packages, setup

setup(
  name="elligator2",
  author="Elligator2 Developers",
  description="Elligator 2 direct map for Montgomery curves in plain Python",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  use_scm_version={"fallback_version": "0.1.0"},
  setup_requires=["setuptools_scm"],
  packages=find_packages(exclude=["tests"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "License :: Public Domain",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
  ],
  install_requires=[],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit"],
    "dev": ["tox", "isort", "yapf"],
  },
)
