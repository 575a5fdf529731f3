# Sphinx configuration for the loess1d API reference.

from importlib import metadata

_dist = metadata.metadata("loess1d")

project = _dist["Name"]
author = _dist.get("Author", "") or "loess1d developers"
release = metadata.version("loess1d")
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

# loess1d mixes Google-style (most modules) and NumPy-style (kernels) docstrings
napoleon_google_docstring = True
napoleon_numpy_docstring = True

autosummary_generate = True
autodoc_typehints = "description"
autodoc_member_order = "bysource"
autodoc_default_options = {
    "members": True,
    "show-inheritance": True,
}

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable", None),
    "sklearn": ("https://scikit-learn.org/stable", None),
}

exclude_patterns = ["_build"]

html_theme = "furo"
html_title = f"{project} {version}"
