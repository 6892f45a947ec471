from setuptools import setup, find_packages
import os
import re


APP_PATH = os.path.dirname(os.path.realpath(__file__))


def read_version():
    '''Read version without importing bmglyph (numpy may be missing)'''
    with open(os.path.join(APP_PATH, 'bmglyph', '__init__.py')) as f:
        return re.search(r'^__version__ = "(.+)"$', f.read(), re.M).group(1)


setup(
    name="bmglyph",
    version=read_version(),
    packages=find_packages(),
    author="realitix",
    author_email="realitix@gmail.com",
    description="bmglyph: BMFont glyph and texture coordinate extraction",
    long_description=open(os.path.join(APP_PATH, "README.md")).read(),
    long_description_content_type="text/markdown",
    install_requires=['numpy', 'path', 'docopt'],
    extras_require={'test': ['pytest']},
    include_package_data=True,
    package_data={'bmglyph': ['tests/files/*.fnt']},
    entry_points={'console_scripts': ['bmglyph = bmglyph.cli:main']},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        'Programming Language :: Python :: Implementation :: CPython',
        "Topic :: Multimedia :: Graphics"
    ],
    license="Apache 2.0"
)
