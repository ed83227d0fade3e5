import sys
import os

# to allow autodoc to discover the documented modules
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

with open(os.path.join(os.path.dirname(__file__), '..', 'VERSION')) as infile:
    release = infile.read().strip()
version = release

project = 'Seatlib'
copyright = '2026, Seatlib contributors'
author = 'Seatlib contributors'

extensions = [
    'sphinx.ext.autodoc',
    'recommonmark',
]

# plugins and options are documented in the order they are declared
autodoc_member_order = 'bysource'
autodoc_default_options = {
    'members': True,
    'show-inheritance': True,
}
autodoc_typehints = 'description'

source_suffix = {
    '.rst': 'restructuredtext',
    '.md': 'markdown',
}

master_doc = 'index'

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

html_theme = 'sphinxdoc'
