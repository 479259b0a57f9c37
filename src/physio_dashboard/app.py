"""
Streamlit script for the installed package.

`streamlit run` executes this file; the launcher in cli.py points at it.
"""
from physio_dashboard.dashboard import main

main()
