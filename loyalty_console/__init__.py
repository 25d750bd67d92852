"""Loyalty console backend package.

Holds the audience resolution and push dispatch flow together with the
permission codec used when editing console principals.
"""
