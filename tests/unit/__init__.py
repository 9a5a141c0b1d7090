"""Unit tests.

Purpose
- Verify one codec, adapter, helper or CLI callback in isolation.

Guidelines
- In-memory streams and ``io.BytesIO`` only; no files outside tmp dirs.
- Pin exact code units and error attributes, not just "it raised".
"""
