"""Third-party backends."""
