"""Build Grafana dashboard rows, panels and templated variables as Python objects."""

__version__ = "0.1.0"