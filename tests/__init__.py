"""Tests for the Replicate client.

Unit tests mock HTTP with respx; ``contract`` pins the wire format and
``integration`` talks to the live API when a token is available.
"""
