"""metcast: Met Office forecasts extracted and resampled onto chosen hours."""

__version__ = "0.1.0"
