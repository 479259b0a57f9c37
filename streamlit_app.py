#!/usr/bin/env python3
"""
Streamlit Dashboard Entry Point

This file delegates to physio_dashboard.dashboard for the assessment page.
"""

from physio_dashboard.dashboard import main

main()
