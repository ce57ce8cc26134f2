"""Combat event records and sequencing, localization, singletons and update checking."""

__version__ = "0.1.0"
__all__ = [
    "combat",
    "localization",
    "mob_ids",
    "sequencer",
    "singleton",
    "structs",
    "update_checker",
]