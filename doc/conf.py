# -- Project information -----------------------------------------------------

project = "transinflow"
copyright = ("2026, University of Illinois Board of Trustees")
author = "Center for Exascale-Enabled Scramjet Design at the University of Illinois"

_ver_file = "../transinflow/version.py"
with open(_ver_file) as ver_file:
    ver_src = ver_file.read()

ver_dic = {}
exec(compile(ver_src, _ver_file, "exec"), ver_dic)
version = ".".join(str(x) for x in ver_dic["VERSION"])

# The full version, including alpha/beta/rc tags.
release = ver_dic["VERSION_TEXT"]


# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.intersphinx",
    "sphinx.ext.autodoc",
    "sphinx.ext.doctest",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx_math_dollar",
    "sphinx_copybutton",
    ]

templates_path = ["_templates"]

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]


# -- Options for HTML output -------------------------------------------------

html_theme = "furo"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3/", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "pytools": ("https://documen.tician.de/pytools/", None),
    "pyrometheus": ("https://pyrometheus.readthedocs.io/en/latest", None),
    "cantera": ("https://cantera.org/documentation/docs-3.0/sphinx/html/", None),
    "logpyle": ("https://logpyle.readthedocs.io/en/latest/", None),
    "mpi4py": ("https://mpi4py.readthedocs.io/en/stable/", None),
    }

autoclass_content = "class"
autodoc_typehints = "description"

nitpicky = True

mathjax3_config = {
    "tex2jax": {
        "inlineMath": [["\\(", "\\)"]],
        "displayMath": [["\\[", "\\]"]],
    },
}

rst_prolog = """
.. |transinflow| replace:: *transinflow*
"""
