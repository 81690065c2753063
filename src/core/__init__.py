"""Core of taskledger: domain models, constrained fields, contracts and settings."""
