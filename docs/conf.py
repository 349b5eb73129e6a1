import sys, os
import sphinx_rtd_theme

# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

sys.path.insert(0, os.path.abspath('../'))

import semiconf

# -- Project information -----------------------------------------------------

project = semiconf.__title__
copyright = semiconf.__copyright__.removeprefix('Copyright (c) ')
author = semiconf.__author__
release = semiconf.__version__

# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx_rtd_theme',
    'sphinx.ext.autodoc',
]

autodoc_default_options = {
    'members': True,
    'exclude-members': '__init__',
}

autodoc_member_order = 'bysource'
autodoc_class_content = 'class'
autodoc_class_signature = 'separated'

templates_path = ['_templates']
exclude_patterns = ['_build']

# -- Options for HTML output -------------------------------------------------

html_theme = 'sphinx_rtd_theme'
html_static_path = ['_static']
