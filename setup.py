import setuptools

setuptools.setup(
    python_requires='>=3.8',
    name='smartrange',
    version='1.0.0',
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'numpy>=1.23.5',
        'numba>=0.56.4'
    ],
    extras_require={
        'test': [
            'pytest>=7.2.0',
            'hypothesis>=6.61.0'
        ]
    }
)
