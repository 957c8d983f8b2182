"""Wire contract tests.

These pin the exact method, path, headers and body the client sends for
each operation, so requests stay byte-compatible with the Replicate REST
API across releases.
"""
