"""Explicit dashboard session and role guards."""
