from setuptools import find_packages, setup

setup(
    name='falink',
    version='0.1.0',
    description='Encoder/decoder for FA-link (FL-net) link-layer frames',
    author='falink contributors',
    author_email='',
    packages=find_packages(include=['falink', 'falink.*']),
    python_requires='>=3.11',
    install_requires=[
        'construct',
        'msgspec',
        'marshmallow>=3.13',
    ],
    extras_require={
        'test': [
            'pytest',
            'hypothesis',
        ],
    },
    entry_points={
        'console_scripts': [
            'falink-frame-debug=falink.frame_debug:main',
        ],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
)
