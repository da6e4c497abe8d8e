"""boilersync - fetch boilerplate template sets and reconcile them locally."""

__version__ = "0.1.0"
