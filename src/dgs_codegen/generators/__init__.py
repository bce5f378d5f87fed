"""Code generators turning GraphQL SDL into framework source files."""
