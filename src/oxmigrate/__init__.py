"""oxmigrate - rename eslint suppression comments to their oxlint form."""

__version__ = "0.1.0"
