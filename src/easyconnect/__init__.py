"""
Toggle a Cisco AnyConnect VPN connection from the command line.
"""

__version__ = "0.1.0"
