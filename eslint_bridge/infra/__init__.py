"""Infrastructure: subprocess, filesystem and engine adapters."""
