"""Command-line front end for codescore."""
