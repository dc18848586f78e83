"""User interfaces for mdfiles."""
