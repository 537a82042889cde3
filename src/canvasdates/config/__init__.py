"""Configuration: settings sources, TOML discovery, logging setup."""
