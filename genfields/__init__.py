"""Generate Get<Field> accessors for the string fields of ipinfo.go."""

__version__ = "0.1.0"
