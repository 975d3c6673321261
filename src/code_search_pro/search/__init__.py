"""
Search indexing and query package.

This package provides a pure-Python in-memory search stack:
- analyzers: Tokenizers and filters shared by indexing and querying
- inverted_index: Token -> record position index built once per engine
- scoring: Exact/prefix/contains match rules and the score accumulator
- autocomplete: Title and topic substring suggestions
"""
