"""Android Notes: a static documentation site for Android development notes."""

__version__ = "0.1.0"
