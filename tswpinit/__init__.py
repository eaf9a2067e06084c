"""ts-wp-init — scaffold a TypeScript + webpack + React front-end project."""

__version__ = "0.1.0"
