"""The ``scalarcodec`` command line."""
