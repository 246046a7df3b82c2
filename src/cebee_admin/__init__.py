"""Admin console for the CeBee Predict sports-prediction app."""

__version__ = "0.1.0"
