import os

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.autosummary',
    'sphinx.ext.intersphinx',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinxcontrib.asyncio',
    'sphinx_autodoc_typehints',
]

source_suffix = '.rst'
master_doc = 'index'
project = 'vendaio'
year = '2026'
author = 'vendaio contributors'
copyright = '{0}, {1}'.format(year, author)
version = release = '0.1.0'

default_role = 'py:obj'
pygments_style = 'trac'
intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'aiohttp': ('https://docs.aiohttp.org/en/stable', None),
}

on_rtd = os.environ.get('READTHEDOCS', None) == 'True'

if not on_rtd:  # only set the theme if we're building docs locally
    html_theme = 'sphinx_rtd_theme'

html_short_title = '%s-%s' % (project, version)

napoleon_use_ivar = True
napoleon_use_rtype = False
napoleon_use_param = False

nitpick_ignore = [
    ('py:obj', 'R'),
    ('py:obj', 'T'),
    ('py:class', 'vendaio.collection.Source'),
]
