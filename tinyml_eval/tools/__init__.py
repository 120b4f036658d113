"""Command-line tools: run the evaluation, export the Wine tables."""
