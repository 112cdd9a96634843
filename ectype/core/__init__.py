"""Core enum helpers: descriptors, labels, collections and invocation."""
