"""Qt application layer: canonical state, widgets and entry points."""
