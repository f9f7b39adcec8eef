"""Search Project Gutenberg and pull short excerpts from public-domain books."""
