"""
Domain exceptions for NicheScout.

The scoring pipeline itself never raises for normalized input; these cover the
configuration seams (presets, factors) and the external data source.
"""


class NicheScoutError(Exception):
    """Base exception for all NicheScout errors."""
    pass


class NicheScanError(NicheScoutError):
    """Raised when the niche data source fails or returns nothing usable."""
    pass


class UnknownPresetError(NicheScoutError, ValueError):
    """Raised when a weight or filter preset id is not in the catalog."""
    pass


class UnknownFactorError(NicheScoutError, ValueError):
    """Raised when a weight factor or filter category does not exist."""
    pass
