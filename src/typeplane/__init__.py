"""TypePlane - structural class diagrams from parsed source trees."""

__version__ = "0.1.0"
