"""2D motion planning: geometry, problems and paths, graphs, gradient descent, timing and YAML I/O."""

__version__ = "0.1.0"

__all__ = [
    "geometry",
    "environment",
    "timing",
    "serialization",
    "graph",
    "gradient_descent",
]