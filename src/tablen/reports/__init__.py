"""Report rendering for scan results."""
