"""Infrastructure layer — profile documents on disk."""
