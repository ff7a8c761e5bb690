"""Core infrastructure: settings, logging, errors and the product store."""
