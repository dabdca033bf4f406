"""Core reading, selection and writing of the SSH agent configuration."""
