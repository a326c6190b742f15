"""Studio portal backend: session timeline derivation service."""
