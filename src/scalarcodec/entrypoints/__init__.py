"""Entry points (CLI) for SCALARCODEC."""
