"""JSON HTTP blueprints."""
