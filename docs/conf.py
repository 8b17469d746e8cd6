# Configuration file for the Sphinx documentation builder.
# https://www.sphinx-doc.org/en/master/usage/configuration.html
import os
import sys

sys.path.insert(0, os.path.abspath("../src"))
from bitcrc.version import get_version

project = "bitcrc"
copyright = "2026, bitcrc developers"
author = "bitcrc developers"
version = release = get_version()

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx.ext.doctest",
    "sphinx_rtd_theme",
]

# Docstring examples are already run by pytest with --doctest-modules
doctest_test_doctest_blocks = ""

autoclass_content = "both"
autodoc_member_order = "bysource"
source_suffix = ".rst"
templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]
intersphinx_mapping = {"python": ("https://docs.python.org/3", None)}

html_theme = "sphinx_rtd_theme"
html_static_path = []
