import setuptools

setuptools.setup(
    name = 'crspline',
    version = '1.0',
    description = 'Catmull-Rom spline tesselation with tangents, normals and arc lengths',
    packages = setuptools.find_packages(exclude=['tests']),
    python_requires = '>=3.6',
    install_requires=['numpy', 'scipy'],
    extras_require={'test': ['pytest']},
)
