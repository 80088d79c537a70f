"""Domain layer: value objects, the template aggregate and its repository port."""
