"""The ``datamount`` command-line interface."""
