from pathlib import Path
from setuptools import setup, find_packages


BASE_DIR = Path(__file__).parent

with open(BASE_DIR / 'README.md') as f:
    long_description = f.read()


setup(
    name="mfdicom",
    version="1.0.0",
    author="mfdicom contributors",
    description="A pure Python writer for multi-frame grayscale DICOM files",
    long_description=long_description,
    long_description_content_type='text/markdown',
    license="MIT",
    keywords="dicom python medical imaging multi-frame",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Intended Audience :: Developers",
        "Intended Audience :: Healthcare Industry",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Medical Science Apps.",
        "Topic :: Software Development :: Libraries"
    ],
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    zip_safe=False,
    python_requires='>=3.10',
    install_requires=["numpy"],
    extras_require={
        "tests": [
            "pytest",
            "pydicom",
        ],
    },
    entry_points={
        "console_scripts": ["mfdicom=mfdicom.cli.main:main"],
    },
)
