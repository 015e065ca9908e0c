# setup.py
from setuptools import setup, Extension
from Cython.Build import cythonize
import os

# Full path to the pyx
pyx_path = os.path.join("symbelix", "compiler", "vm_cy.pyx")

setup(
    ext_modules=cythonize(
        Extension(
            name="symbelix.compiler.vm_cy",  # module path for import
            sources=[pyx_path],
        ),
        compiler_directives={'language_level': "3"}
    ),
    zip_safe=False,
)
