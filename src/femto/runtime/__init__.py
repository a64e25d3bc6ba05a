"""Input loop, terminal boundary types, and telemetry."""
