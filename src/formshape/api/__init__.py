"""REST API for formshape."""
