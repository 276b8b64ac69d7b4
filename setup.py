"""Setup script for SketchCity package."""

from setuptools import find_packages, setup

setup(
    name='sketchcity',
    version='0.1.0',
    author='SketchCity Team',
    author_email='example@example.com',
    description='Procedural miniature city generator rendered as a hand-drawn illustration',
    long_description=open('README.md', encoding='utf-8').read(),
    long_description_content_type='text/markdown',
    url='https://github.com/example/sketchcity',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    package_data={
        'sketchcity.config': ['*.yaml'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'pillow',
        'pyyaml',
    ],
    extras_require={
        'dev': [
            'pytest',
            'flake8',
            'black',
        ],
    },
)
