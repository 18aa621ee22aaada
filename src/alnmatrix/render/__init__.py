"""Symbol sets and the grid formatter."""
