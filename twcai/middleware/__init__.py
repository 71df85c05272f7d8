"""Request middleware: authentication and tracing headers."""
