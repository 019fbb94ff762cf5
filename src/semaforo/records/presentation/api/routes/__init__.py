from . import traffic, predictions

__all__ = ["traffic", "predictions"]
