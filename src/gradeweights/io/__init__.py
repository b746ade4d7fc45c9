"""Read gradebook records and export gradebook setups."""

from . import records
from . import export

__all__ = ["records", "export"]
