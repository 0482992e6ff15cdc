"""TaxBridge: Nigeria Tax Act 2025 estimates for PIT, VAT and CIT."""

__version__ = "0.1.0"
