"""ExpirApp: commerce administration backend for perishable goods."""

__version__ = "0.1.0"
