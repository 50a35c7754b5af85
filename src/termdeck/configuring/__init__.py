"""Application settings and resolution of deck configurations."""
