"""Domain layer: entities, validators and rental services."""
