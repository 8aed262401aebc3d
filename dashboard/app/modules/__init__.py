"""Screen controllers grouped by business area."""
