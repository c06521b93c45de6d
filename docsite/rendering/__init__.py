"""Template rendering and output I/O."""
