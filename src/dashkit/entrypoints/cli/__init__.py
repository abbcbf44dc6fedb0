"""The ``dashkit`` command-line interface."""
