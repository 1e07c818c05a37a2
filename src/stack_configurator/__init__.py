"""Stack Configurator: suite placement for modular residential buildings."""

__version__ = "0.1.0"
