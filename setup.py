import os
from setuptools import setup, find_packages

# Read version from _version.py (exec, not import: the package is not installed yet)
version_file = os.path.join(os.path.dirname(__file__), "wmctrl_wrapper", "_version.py")
with open(version_file) as f:
    exec(f.read())

setup(
    name="wmctrl-wrapper",
    version=get_pip_version() if "get_pip_version" in locals() else "0.0.0",
    description="Python binding for bundled, architecture-specific wmctrl binaries",
    long_description=open("README.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "wmctrl_wrapper": ["bin/wmctrl-*", "bin/README.md"],
    },
    entry_points={
        "console_scripts": [
            "wmctrl-wrapper=wmctrl_wrapper.cli:main",
        ],
    },
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console",
        "Environment :: X11 Applications",
        "Intended Audience :: Developers",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Desktop Environment :: Window Managers",
        "Topic :: Utilities",
    ],
    python_requires=">=3.8",
)
