#!/usr/bin/env python
# -*- coding: utf-8 -*-
import os
import shutil

from setuptools import setup, Command, find_packages

# ------------------------------------------------------------------
# Administrative

curdir = os.path.abspath(os.path.dirname(__file__))
README = open(os.path.join(curdir, "README.md")).read()

DISTNAME = 'bvartools'
VERSION = '0.1.0'
DESCRIPTION = 'Bayesian inference for VAR and VEC models'
LONG_DESCRIPTION = README
LICENSE = 'BSD License'

classifiers = ['Development Status :: 4 - Beta',
               'Environment :: Console',
               'Programming Language :: Python :: 3',
               'Operating System :: OS Independent',
               'Intended Audience :: Developers',
               'Intended Audience :: Science/Research',
               'Natural Language :: English',
               'License :: OSI Approved :: BSD License',
               'Topic :: Scientific/Engineering']

# ------------------------------------------------------------------
# Dependencies

extras = {'test': ['pytest>=3.0']}
min_versions = {'numpy': '1.17.0',
                'scipy': '1.4.0',
                'pandas': '1.0.0',
                'joblib': '0.14.0'}

setuptools_kwargs = {
    "zip_safe": False,
    'install_requires': [
        "{name} >= {version}".format(name=name, version=version)
        for name, version in sorted(min_versions.items())],
    'python_requires': '>=3.6'}


class CleanCommand(Command):
    """Custom distutils command to clean the .pyc files."""

    user_options = [("all", "a", "")]

    def initialize_options(self):
        self.all = True
        self._clean_me = []
        self._clean_trees = []

        for root, dirs, files in list(os.walk('bvartools')):
            for f in files:
                if os.path.splitext(f)[-1] in ('.pyc', '.pyo', '.orig'):
                    self._clean_me.append(os.path.join(root, f))
            for d in dirs:
                if d == '__pycache__':
                    self._clean_trees.append(os.path.join(root, d))

        for d in ('build', 'dist'):
            if os.path.exists(d):
                self._clean_trees.append(d)

    def finalize_options(self):
        pass

    def run(self):
        for clean_me in self._clean_me:
            os.unlink(clean_me)
        for clean_tree in self._clean_trees:
            shutil.rmtree(clean_tree)


setup(name=DISTNAME,
      version=VERSION,
      description=DESCRIPTION,
      license=LICENSE,
      long_description=LONG_DESCRIPTION,
      long_description_content_type='text/markdown',
      classifiers=classifiers,
      platforms='any',
      cmdclass={'clean': CleanCommand},
      packages=find_packages(),
      include_package_data=False,
      extras_require=extras,
      **setuptools_kwargs)
