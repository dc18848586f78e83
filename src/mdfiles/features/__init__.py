"""Feature packages for mdfiles."""
