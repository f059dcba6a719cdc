"""Core model of nutrition plans."""
