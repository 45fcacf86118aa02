import setuptools

__version__ = '0.1.0'



with open("README.md", "r") as fh:
    long_description = fh.read()


setuptools.setup(
    name='fntoolbox',
    version=__version__,
    license='GPL 3.0',
    description='Function decoration and composition helpers, injectable body merging, bounded FIFO queue.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        'Development Status :: 2 - Pre-Alpha',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Programming Language :: Python :: 3',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
    ],

    keywords=[
        'functional', 'decorator', 'composition', 'dependency injection', 'queue',
    ],

    packages=setuptools.find_packages(where='src'),
    package_dir={'': 'src'},

    include_package_data=True,
    zip_safe=False,
    install_requires=['attrs'],
    python_requires='>=3.9',
    extras_require={
        'tests': ['pytest'],
    },
)
