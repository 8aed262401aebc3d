"""Client-side application layer of the Madde management dashboard."""
