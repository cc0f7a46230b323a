"""Backend services for the NEO fitness application."""
