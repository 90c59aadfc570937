"""Desktop simulator built on pygame."""
