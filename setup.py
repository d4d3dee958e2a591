import setuptools

with open("README.rst", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="enotes",
    version="0.1.0",
    author="Jacob Williams",
    author_email="jacobaw@gmail.com",
    description="Helpers for managing Evernote notebooks and notes from Python and the command line.",
    long_description=long_description,
    long_description_content_type="text/x-rst",
    url="https://github.com/brokensandals/enotes",
    packages=setuptools.find_packages('src'),
    package_dir={'': 'src'},
    entry_points={
        'console_scripts': [
            'enotes = enotes.cli:main'
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    install_requires=[
        'beautifulsoup4>=4.9.1',
        'evernote3',
        'lxml',
        'Mako>=1.1.3',
        'terminaltables',
    ],
    extras_require={
        'test': [
            'pyfakefs',
            'pytest',
        ],
    },
    python_requires='>=3.7',
)
