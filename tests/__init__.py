"""
Only the root tests directory carries an __init__.py; subdirectories are namespace
packages (PEP 420). Keep test module names unique across the tree.
"""
