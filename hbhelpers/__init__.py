"""hbhelpers: collection helpers for Handlebars templates rendered with pybars."""

__version__ = "0.3.0"
