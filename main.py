#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [play]
    python main.py evaluate [--size N] [--mines M] [--games G] [--seed S]
"""
from src.minesweeper.cli import main


if __name__ == "__main__":
    main()
