"""Application layer: formatting rules, spinner lifecycle and event handlers."""
