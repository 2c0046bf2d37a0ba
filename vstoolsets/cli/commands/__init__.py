"""CLI command implementations for vstoolsets."""
