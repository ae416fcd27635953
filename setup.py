from Cython.Build import cythonize
from setuptools import setup, Extension, find_packages
import numpy as np


extensions = [
    Extension(
        name="rlfm.index.rank",             # full dotted module path
        sources=["rlfm/index/rank.py"],     # compiled in pure-python mode
        include_dirs=[np.get_include()],
        optional=True,                      # falls back to the .py module if no compiler
    ),
]

setup(
    name="rlfm",
    version="0.1.0",
    description="Burrows-Wheeler transform and FM-index backward search",
    packages=find_packages(include=["rlfm", "rlfm.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "psutil",
        "regex",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["rlfm=rlfm.main:main"],
    },
    ext_modules=cythonize(
        extensions,
        compiler_directives={"language_level": "3", "annotation_typing": False},
    ),
    zip_safe=False,
)
