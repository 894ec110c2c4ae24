"""Payroll System package.

Organized by feature modules (employees, leaves, departments, users, uploads)
with a thin Flask controller layer over service/repository layers.
"""
