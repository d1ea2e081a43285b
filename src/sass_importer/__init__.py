"""Sass importer — compile .scss/.sass sources into structured stylesheets."""

__version__ = "0.1.0"
