import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pyquad",
    version="0.1.0",
    author="pyquad developers",
    description="Accurate roots of quadratic equations in IEEE half, "
                "single and double precision.",
    include_package_data=True,
    install_requires=[
        'numpy>=1.22'
    ],
    extras_require={
        'test': ['pytest'],
    },
    keywords='quadratic equation roots floating point numerical',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['pyquad', 'pyquad.*']),
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)
