"""Contractor System package.

Organized by feature modules (contractors, payroll) with a thin console
controller layer on top of service/repository layers.
"""
