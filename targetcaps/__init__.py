"""targetcaps — resolve build target identifiers into capability flags."""

__version__ = "0.1.0"
