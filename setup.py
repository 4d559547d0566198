# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="mkstruct",
    version="1.2.0",
    description="Genera carpetas y archivos vacíos a partir de un árbol ASCII o una lista de rutas",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["mkstruct*"]),
    package_data={
        "mkstruct.interface.locales": ["*.json"],
    },
    include_package_data=True,
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'mkstruct=mkstruct.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
)
