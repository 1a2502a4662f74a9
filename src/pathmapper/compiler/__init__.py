"""Pattern compiler — pattern string to parts and one whole-path expression.

Patterns are compiled once when a PathMapper is constructed; the result
is immutable and reused for every test/match/stringify call.
"""
