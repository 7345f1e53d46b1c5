"""Setup script for pyspritz - pure Python Spritz stream cipher and hash"""

from setuptools import setup

if __name__ == "__main__":
    setup(
        name="pyspritz",
        version="0.1.0",
        description="Spritz stream cipher and hash in pure Python",
        packages=["pyspritz"],
        python_requires=">=3.12",
        install_requires=[],
        extras_require={"test": ["pytest"]},
        classifiers=[
            "Programming Language :: Python :: 3",
            "Topic :: Security :: Cryptography",
        ],
    )
