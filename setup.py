from setuptools import setup

setup(
    name='curvedtext',
    version='1.0.0',
    description='Text along a circular arc, rendered into a trimmed raster surface',
    url='https://tmgc.fit.vutbr.cz/',
    author='Vojtech Bartl, Adam Herout, ',
    author_email='ibartl@fit.vut.cz, herout@fit.vut.cz',
    license='MIT',
    packages=['curvedtext'],
    package_dir={'curvedtext': 'src'},
    install_requires=[
                    'skia-python',
                    'numpy',
                    'colour',
                    'Pillow',
                    'structlog'
                    ],
    extras_require={
                    'test': ['pytest']
                    },
    python_requires='>=3.10',

    classifiers=[
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python :: 3'
    ],
)
