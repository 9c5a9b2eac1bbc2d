"""bank-bistro: in-memory banking ledger and restaurant ordering domains"""

__version__ = "0.1.0"
