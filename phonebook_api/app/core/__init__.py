"""Core building blocks: settings, logging, errors and storage."""
