"""odiag-split — split oversized OpenDiag session logs into smaller files."""
