"""Rich terminal output for the Quill CLI."""
