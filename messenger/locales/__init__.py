"""Bundled diagnostic message catalogs (``<locale>/messages.yaml``)."""
