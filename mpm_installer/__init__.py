"""
MPM Installer — interactive front-end for the MathWorks Package Manager.
"""

__version__ = "0.1.0"
