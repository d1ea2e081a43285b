"""Console entry point for ``sass-importer``."""

from sass_importer.presentation.cli.app import app

if __name__ == "__main__":
    app()
