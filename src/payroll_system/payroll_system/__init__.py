"""Payroll System package.

Organized by feature modules (staff, attendance, holidays, leaves, payroll)
with a thin Flask controller layer over service/repository layers.
"""
