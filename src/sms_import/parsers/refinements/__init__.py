"""Bank-specific parser refinements.

Each refinement extends GenericSmsParser and overrides only what's different
for that specific bank (amount wording, merchant delimiters, date layout).
"""

from .acb import ACBParser
from .bidv import BIDVParser
from .techcombank import TechcombankParser
from .vietcombank import VietcombankParser
from .vpbank import VPBankParser

__all__ = [
    "VietcombankParser",
    "TechcombankParser",
    "VPBankParser",
    "ACBParser",
    "BIDVParser",
]
