"""Small text, number and process utilities: geometry, brackets, palindromes, number and table files, procfs and process control."""

__version__ = "0.1.0"