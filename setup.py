import setuptools

__version__ = '0.1.0'


with open("README.md", "r") as fh:
    long_description = fh.read()


setuptools.setup(
    name='pipep',
    version=__version__,
    license='GPL 3.0',
    description='Curried pipelines of sync and async handlers with automatic awaiting.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        'Development Status :: 2 - Pre-Alpha',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Programming Language :: Python :: 3',
        'Intended Audience :: Developers',
        'Framework :: AsyncIO',
    ],

    keywords=['pipe', 'compose', 'curry', 'asyncio'],

    packages=['pipep', 'pipep.core'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    install_requires=['numpy', 'pyyaml', 'pyyaml-include>=1.3,<2'],
    python_requires='>=3.8',
    extras_require={
        'tests': ['pytest'],
    },
)
