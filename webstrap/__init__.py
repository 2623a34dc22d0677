"""Webstrap: install and enable a web server on Debian or Red Hat hosts."""

__version__ = "0.1.0"
