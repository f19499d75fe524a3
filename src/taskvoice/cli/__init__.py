"""Developer command line tools."""
