"""Configuration, logging and backend transport."""
