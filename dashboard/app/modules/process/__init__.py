"""Order pipeline, per-stage process times and unit costs."""
