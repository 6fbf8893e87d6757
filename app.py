#!/usr/bin/env python3
"""
FastFetch web view
Serves the colored output of `fastfetch` as an HTML page, refreshed at most once a minute.
"""

from fastfetch_web.server import main

if __name__ == '__main__':
    main()
