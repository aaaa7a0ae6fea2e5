"""Command-line interface for risio."""
