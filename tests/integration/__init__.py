"""Integration tests against the live Replicate API.

Skipped unless ``REPLICATE_API_TOKEN`` is set. They only read public data
and never create predictions, so running them costs nothing.
"""
