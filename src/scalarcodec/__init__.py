"""SCALARCODEC

Stateless codecs converting between Unicode scalar values and their UTF-8,
UTF-16 and 7-bit ASCII code units. Codecs read and write through a minimal
stream contract so the same logic serves memory buffers, files and sockets.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
