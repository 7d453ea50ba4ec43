"""Retail field-staff attendance & inventory service.

This package is organized by feature modules (users, attendance, inventory,
targets, reports, ...) with a thin Flask controller layer over service and
repository layers. All state is held in memory for the process lifetime.
"""
