"""Sphinx configuration for maybe-hex docs."""
import os
import sys
from datetime import datetime, timezone

# Ensure the src layout is importable for autodoc
sys.path.insert(0, os.path.abspath("../src"))

project = "maybe-hex"
author = "maybe-hex contributors"
year = datetime.now(timezone.utc).year
copyright = f"{year}, {author}"

extensions = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

html_theme = "furo"
html_static_path = ["_static"]
