"""Treebank grammars (treegram).

Main components:

- A parser for bracketed syntax trees.
- Facilities to read off probabilistic context-free grammars (PCFG) from
  treebanks, and to binarize their rules for use with chart parsers.
"""
__version__ = '0.1.0'
