# CLI package for Howard
"""
Command-line interface for Howard.

Commands:
    howard name   — Show generated claim names
    howard bench  — Run the claim performance suite
"""
