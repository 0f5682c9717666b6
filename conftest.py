"""
Root conftest.py - puts the project root first on sys.path so the tests import
the working tree rather than an installed copy.
"""
import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
