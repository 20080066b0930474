"""Unified command-line interface for tillscan.

Usage:
    tillscan parse <lines_file> [--json]
    tillscan scan <image> [--no-save] [--json]
    tillscan list
    tillscan show <id> [--json]
    tillscan labels <image> [--min-confidence N]
    tillscan celebrities <image>
    tillscan serve [--host] [--port]
"""
