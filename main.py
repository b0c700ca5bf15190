#!/usr/bin/env python3
"""
Monty Hall - a Monte Carlo comparison of staying and switching
"""

from montyhall.cli.__main__ import main


if __name__ == '__main__':
    main()
