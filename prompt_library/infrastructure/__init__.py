"""Infrastructure layer: persistence, storage adapters and service wiring."""
