"""Terminal input and rendering."""
