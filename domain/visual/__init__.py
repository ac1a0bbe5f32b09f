"""Photo-based body condition and feed correlation analytics."""
