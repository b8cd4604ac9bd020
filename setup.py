# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="assetgen",
    version="0.1.0",
    description="Genera constantes Python tipadas para los assets estáticos de un proyecto web",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["assetgen", "assetgen.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'assetgen=assetgen.main:main',  # Permite ejecutar el generador vía CLI
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
