"""User-facing interfaces for emojindex."""
