"""Package defaults and persisted user settings."""
