"""
Shared helpers: errors, normalization, protocol conversion, SSE decoding, token estimation.
"""
