from glob import glob
from setuptools import setup


setup(
    name='smartcalc',
    version='0.1.0',
    description='Single-variable expression calculator and grapher',
    install_requires=[
        'regex',
        'prompt_toolkit>=3.0.29',
    ],
    packages=['smartcalc'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    python_requires='>=3.6',
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
            'coverage',
            'flake8',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
