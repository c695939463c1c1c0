"""Wire models exchanged with the parent process."""
