"""Command-line interface for curlparse."""
