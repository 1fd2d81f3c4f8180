"""Domain layer: value models and pure calculators."""
