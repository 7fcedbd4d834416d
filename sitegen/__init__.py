"""11ty Website Generator -- scaffolds Eleventy static sites with optional i18n and Decap CMS."""

__version__ = "1.0.0"
