"""CLI configuration stored as TOML in the user config directory."""
